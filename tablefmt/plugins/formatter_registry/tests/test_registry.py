# tablefmt/plugins/formatter_registry/tests/test_registry.py
"""Tests for FormatterRegistry and Disposable."""

from unittest.mock import MagicMock

from tablefmt.plugins.formatter_registry import (
    Disposable,
    DocumentFormattingEditProvider,
    FormatterRegistry,
    create_registry,
)


class StubProvider:
    """Document formatter returning a fixed edit list."""

    def __init__(self, edits):
        self.edits = edits
        self.calls = []

    def provide_formatting_edits(self, document, options=None, token=None):
        self.calls.append((document, options, token))
        return self.edits


class TestDisposable:

    def test_dispose_runs_once(self):
        callback = MagicMock()
        handle = Disposable(callback)

        handle.dispose()
        handle.dispose()

        callback.assert_called_once_with()
        assert handle.disposed is True

    def test_context_manager(self):
        callback = MagicMock()

        with Disposable(callback) as handle:
            assert handle.disposed is False

        callback.assert_called_once_with()


class TestDocumentFormatters:

    def test_stub_satisfies_protocol(self):
        assert isinstance(StubProvider([]), DocumentFormattingEditProvider)
        assert not isinstance(object(), DocumentFormattingEditProvider)

    def test_dispatch_by_language(self):
        registry = create_registry()
        provider = StubProvider(["edit"])
        registry.register_document_formatter("markdown", provider)

        assert registry.provide_edits("markdown", "doc", "opts", "token") == ["edit"]
        assert provider.calls == [("doc", "opts", "token")]
        assert registry.provide_edits("python", "doc") == []

    def test_latest_registration_wins(self):
        registry = FormatterRegistry()
        first = StubProvider(["first"])
        second = StubProvider(["second"])
        registry.register_document_formatter("markdown", first)
        handle = registry.register_document_formatter("markdown", second)

        assert registry.provide_edits("markdown", "doc") == ["second"]

        handle.dispose()
        assert registry.provide_edits("markdown", "doc") == ["first"]

    def test_disposing_older_registration_keeps_newer(self):
        registry = FormatterRegistry()
        first = StubProvider(["first"])
        second = StubProvider(["second"])
        handle = registry.register_document_formatter("markdown", first)
        registry.register_document_formatter("markdown", second)

        handle.dispose()

        assert registry.get_document_formatter("markdown") is second

    def test_double_dispose_is_harmless(self):
        registry = FormatterRegistry()
        provider = StubProvider([])
        handle = registry.register_document_formatter("markdown", provider)

        handle.dispose()
        handle.dispose()

        assert registry.get_document_formatter("markdown") is None

    def test_registration_traced(self, tmp_path, monkeypatch):
        trace_file = tmp_path / "trace.log"
        monkeypatch.setenv("TABLEFMT_TRACE_LOG", str(trace_file))
        registry = FormatterRegistry()

        registry.register_document_formatter("markdown", StubProvider([])).dispose()
        registry.provide_edits("markdown", "doc")

        content = trace_file.read_text(encoding="utf-8")
        assert "[FormatterRegistry] register_document_formatter: StubProvider for markdown" in content
        assert "dispose: StubProvider for markdown" in content
        assert "no formatter for markdown" in content
