"""Unit tests for AstroidGateway symbol resolution and parsing."""

import tempfile
import unittest
from pathlib import Path

import astroid

from loglevel_guard.infrastructure.gateways.astroid_gateway import AstroidGateway
from tests.linter_test_utils import calls_in, parse_program, register_log4net_stub


class TestResolveMethodQname(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        register_log4net_stub()

    def setUp(self) -> None:
        self.gateway = AstroidGateway()

    def _method_ref(self, body: str) -> astroid.nodes.Attribute:
        calls = calls_in(parse_program(body))
        return calls[-1].func

    def test_resolves_log4net_method(self) -> None:
        ref = self._method_ref('Log.Debug("Hello world")')
        self.assertEqual(self.gateway.resolve_method_qname(ref), "log4net.ILog.Debug")

    def test_resolves_format_variant(self) -> None:
        ref = self._method_ref('Log.DebugFormat("Hello {0}", "world")')
        self.assertEqual(self.gateway.resolve_method_qname(ref), "log4net.ILog.DebugFormat")

    def test_undefined_receiver_is_unresolved(self) -> None:
        ref = self._method_ref('missing_logger.Debug("Hello world")')
        self.assertIsNone(self.gateway.resolve_method_qname(ref))

    def test_unknown_attribute_is_unresolved(self) -> None:
        ref = self._method_ref('Log.DebugVerbose("Hello world")')
        self.assertIsNone(self.gateway.resolve_method_qname(ref))

    def test_non_method_attribute_is_unresolved(self) -> None:
        node = astroid.extract_node(
            """
            class Holder:
                DebugLevel = 10
            Holder().DebugLevel #@
            """
        )
        self.assertIsNone(self.gateway.resolve_method_qname(node))

    def test_local_class_resolves_to_its_own_qname(self) -> None:
        module = astroid.parse(
            """
            class Tracer:
                def Debug(self, message):
                    pass

            Tracer().Debug("x")
            """,
            module_name="tracing",
        )
        ref = calls_in(module)[-1].func
        self.assertEqual(self.gateway.resolve_method_qname(ref), "tracing.Tracer.Debug")


class TestParseFile(unittest.TestCase):
    def test_parse_file_builds_module(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "service_module.py"
            path.write_text("x = 1\n", encoding="utf-8")
            module = AstroidGateway().parse_file(str(path))
        self.assertIsInstance(module, astroid.nodes.Module)
        self.assertEqual(len(module.body), 1)

    def test_parse_file_raises_on_syntax_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "broken_module.py"
            path.write_text("def broken(:\n", encoding="utf-8")
            with self.assertRaises(astroid.AstroidBuildingError):
                AstroidGateway().parse_file(str(path))
