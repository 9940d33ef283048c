"""Astroid gateway: parsing and symbol resolution through astroid inference."""

import logging
from typing import Optional

import astroid

from loglevel_guard.domain.protocols import AstroidProtocol

logger = logging.getLogger(__name__)


class AstroidGateway(AstroidProtocol):
    """Infrastructure implementation of AstroidProtocol."""

    def parse_file(self, file_path: str) -> astroid.nodes.Module:
        """Parse a file and return the astroid Module node.

        Raises astroid.AstroidBuildingError (AstroidSyntaxError for bad source).
        """
        return astroid.MANAGER.ast_from_file(file_path, source=True)

    def resolve_method_qname(self, node: astroid.nodes.NodeNG) -> Optional[str]:
        """Qualified name of the method a member access refers to; None when not a method or unknown."""
        try:
            for inferred in node.infer():
                if inferred is astroid.Uninferable:
                    continue
                if isinstance(inferred, (astroid.nodes.FunctionDef, astroid.UnboundMethod)):
                    return str(inferred.qname())
        except astroid.AstroidError as exc:
            logger.debug("Inference failed for %s: %s", node.as_string(), exc)
        return None
