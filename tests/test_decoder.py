"""Tests for the tree builder."""

import threading

import pytest

from manifestkit.yamlsubset import (
    MalformedLineError,
    OrphanSequenceItemError,
    YAMLIndentationError,
    YAMLSubsetError,
    decode,
    loads,
)


class TestDecode:
    """Tests for lenient decoding."""

    def test_indentation_nesting(self):
        text = "a:\n  b: 1\n  c:\n    d: 2\n"
        assert loads(text) == {"a": {"b": 1, "c": {"d": 2}}}

    def test_sequence_under_key(self):
        text = 'items:\n  - 1\n  - two\n  - "3"\n'
        assert loads(text) == {"items": [1, "two", "3"]}

    def test_sequence_at_same_indent_as_key(self):
        text = "args:\n- --insecure\n- --port\nname: server\n"
        assert loads(text) == {"args": ["--insecure", "--port"], "name": "server"}

    def test_explicit_empty_sequence(self):
        assert loads("finalizers: []\n") == {"finalizers": []}

    def test_items_after_explicit_empty_sequence(self):
        text = "hosts: []\n  - a\n  - b\n"
        assert loads(text) == {"hosts": ["a", "b"]}

    def test_empty_object_start(self):
        assert loads("annotations:\nkind: Service\n") == {"annotations": {}, "kind": "Service"}

    def test_comment_only_document_is_empty(self):
        assert loads("# header\n\n   \n# footer\n") == {}

    def test_duplicate_key_last_write_wins(self):
        assert loads("x: 1\nx: 2\n") == {"x": 2}

    def test_dedent_returns_to_parent(self):
        text = (
            "metadata:\n"
            "  name: argocd\n"
            "  labels:\n"
            "    app: argocd\n"
            "  namespace: argocd-ns\n"
            "spec:\n"
            "  replicas: 1\n"
        )
        assert loads(text) == {
            "metadata": {"name": "argocd", "labels": {"app": "argocd"}, "namespace": "argocd-ns"},
            "spec": {"replicas": 1},
        }

    def test_nested_sequences_in_mappings(self):
        text = (
            "spec:\n"
            "  ports:\n"
            "    - 80\n"
            "    - 443\n"
            "  selectors:\n"
            "    - app\n"
            "  enabled: true\n"
        )
        assert loads(text) == {
            "spec": {"ports": [80, 443], "selectors": ["app"], "enabled": True}
        }

    def test_quoted_values_keep_types(self):
        text = 'version: "1.0"\nflag: "false"\nempty: ""\nnothing:\n'
        assert loads(text) == {"version": "1.0", "flag": "false", "empty": "", "nothing": {}}

    def test_crlf_line_endings(self):
        assert loads("a:\r\n  b: 1\r\n") == {"a": {"b": 1}}

    def test_decode_accepts_any_iterable(self):
        assert decode(iter(["kind: Package", "spec:", "  version: 2"])) == {
            "kind": "Package",
            "spec": {"version": 2},
        }

    def test_custom_indent_unit(self):
        text = "a:\n    b:\n        c: 1\n    d: 2\n"
        assert loads(text, indent_unit=4) == {"a": {"b": {"c": 1}, "d": 2}}

    def test_invalid_indent_unit(self):
        with pytest.raises(ValueError):
            loads("a: 1", indent_unit=0)


class TestLenientDegradation:
    """Malformed input is skipped rather than rejected by default."""

    def test_malformed_lines_are_skipped(self):
        assert loads("a: 1\nnot a mapping line\nb: 2\n") == {"a": 1, "b": 2}

    def test_odd_indentation_is_truncated(self):
        # three spaces count as one level
        assert loads("a:\n   b: 1\n") == {"a": {"b": 1}}

    def test_orphan_sequence_item_is_dropped(self):
        assert loads("- stray\nkind: Package\n") == {"kind": "Package"}

    def test_item_after_populated_mapping_is_dropped(self):
        text = "a:\n  b: 1\n  - 2\n"
        assert loads(text) == {"a": {"b": 1}}

    def test_mapping_entry_inside_sequence_is_dropped(self):
        text = "a:\n  - 1\n  b: 2\n"
        assert loads(text) == {"a": [1]}

    def test_empty_key_is_kept(self):
        assert loads("a: 1\n: 2\n") == {"a": 1, "": 2}

    def test_document_separator_is_skipped(self):
        assert loads("---\nkind: Package\n") == {"kind": "Package"}


class TestStrictMode:
    """Strict mode raises with 1-based line numbers."""

    def test_malformed_line(self):
        with pytest.raises(MalformedLineError) as exc_info:
            loads("a: 1\n\nnot a mapping line\n", strict=True)
        assert exc_info.value.line_number == 3
        assert str(exc_info.value).startswith("line 3:")

    def test_odd_indentation(self):
        with pytest.raises(YAMLIndentationError) as exc_info:
            loads("a:\n   b: 1\n", strict=True)
        assert exc_info.value.line_number == 2

    def test_tab_indentation(self):
        with pytest.raises(YAMLIndentationError) as exc_info:
            loads("a:\n\tb: 1\n", strict=True)
        assert exc_info.value.line_number == 2

    def test_orphan_sequence_item(self):
        with pytest.raises(OrphanSequenceItemError) as exc_info:
            loads("# list\n- stray\n", strict=True)
        assert exc_info.value.line_number == 2

    def test_mapping_entry_inside_sequence(self):
        with pytest.raises(MalformedLineError) as exc_info:
            loads("a:\n  - 1\n  b: 2\n", strict=True)
        assert exc_info.value.line_number == 3

    def test_empty_key(self):
        with pytest.raises(MalformedLineError) as exc_info:
            loads("a: 1\n: 2\n", strict=True)
        assert exc_info.value.line_number == 2

    def test_errors_share_a_base_class(self):
        with pytest.raises(YAMLSubsetError):
            loads("oops\n", strict=True)
        with pytest.raises(ValueError):
            loads("oops\n", strict=True)

    def test_well_formed_input_passes(self, package_manifest):
        assert loads(package_manifest, strict=True) == loads(package_manifest)


def test_concurrent_decoding_is_independent():
    """Decoding holds no shared state, so parallel calls do not interfere."""
    documents = [f"index: {i}\nitems:\n  - {i}\n  - {i + 1}\n" for i in range(32)]
    results = [None] * len(documents)

    def worker(position):
        for _ in range(50):
            results[position] = loads(documents[position])

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(len(documents))]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    for i, result in enumerate(results):
        assert result == {"index": i, "items": [i, i + 1]}
