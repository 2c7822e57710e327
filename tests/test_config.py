import io
import logging

from safe_wipe.config import (
    DEFAULT_ABORT_MESSAGE,
    DEFAULT_CONFIRM_MESSAGE,
    DEFAULT_CONTAINED_MESSAGE,
    DEFAULT_IGNORE,
    Messages,
    WipeConfig,
    resolve_config,
)


def test_resolve_config_without_overrides_returns_defaults():
    config = resolve_config()

    assert config.ignore == frozenset({".DS_Store", "Thumbs.db"})
    assert config.parent is None
    assert config.interactive is True
    assert config.force is False
    assert config.silent is False
    assert config.messages == Messages(
        contained=DEFAULT_CONTAINED_MESSAGE,
        confirm=DEFAULT_CONFIRM_MESSAGE,
        abort=DEFAULT_ABORT_MESSAGE,
    )


def test_resolve_config_overlays_fields_onto_base():
    stdin, stdout, stderr = io.StringIO(), io.StringIO(), io.StringIO()
    base = WipeConfig(input_stream=stdin, output_stream=stdout, error_stream=stderr)

    config = resolve_config({"force": True, "parent": "/srv/app"}, base=base)

    assert config.force is True
    assert config.parent == "/srv/app"
    assert config.input_stream is stdin
    assert config.output_stream is stdout
    assert config.error_stream is stderr
    assert config.interactive is True


def test_resolve_config_maps_stream_keys():
    stdin, stdout = io.StringIO(), io.StringIO()

    config = resolve_config({"input": stdin, "output": stdout, "error": None})

    assert config.input_stream is stdin
    assert config.output_stream is stdout
    assert config.error_stream is None


def test_partial_messages_keep_other_defaults():
    config = resolve_config({"messages": {"abort": "nope"}})

    assert config.messages.abort == "nope"
    assert config.messages.confirm == DEFAULT_CONFIRM_MESSAGE
    assert config.messages.contained == DEFAULT_CONTAINED_MESSAGE


def test_partial_messages_merge_over_bound_messages():
    base = resolve_config({"messages": {"confirm": "sure? "}})

    config = resolve_config({"messages": {"abort": "stopped"}}, base=base)

    assert config.messages.confirm == "sure? "
    assert config.messages.abort == "stopped"
    assert config.messages.contained == DEFAULT_CONTAINED_MESSAGE


def test_ignore_is_replaced_in_full():
    config = resolve_config({"ignore": [".keep"]})

    assert config.ignore == frozenset({".keep"})
    assert not (DEFAULT_IGNORE & config.ignore)


def test_empty_ignore_disables_filtering():
    assert resolve_config({"ignore": []}).ignore == frozenset()
    assert resolve_config({"ignore": None}).ignore == frozenset()


def test_resolved_config_is_returned_as_is():
    resolved = WipeConfig(force=True)

    assert resolve_config(resolved, base=WipeConfig()) is resolved


def test_unknown_keys_are_ignored_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="safe_wipe.config"):
        config = resolve_config({"forse": True, "messages": {"bye": "x"}})

    assert config.force is False
    assert "forse" in caplog.text
    assert "bye" in caplog.text


def test_resolved_config_is_immutable():
    config = resolve_config()

    try:
        config.force = True  # type: ignore[misc]
    except AttributeError:
        pass
    else:
        raise AssertionError("expected WipeConfig to be frozen")


def test_non_mapping_overrides_keep_base(caplog):
    base = WipeConfig(force=True)

    with caplog.at_level(logging.WARNING, logger="safe_wipe.config"):
        config = resolve_config(["force"], base=base)  # type: ignore[arg-type]

    assert config is base
    assert "unexpected type list" in caplog.text


def test_non_mapping_messages_keep_base_messages(caplog):
    with caplog.at_level(logging.WARNING, logger="safe_wipe.config"):
        config = resolve_config({"messages": "oops", "silent": True})

    assert config.messages == Messages()
    assert config.silent is True
    assert "unexpected type str" in caplog.text


def test_non_iterable_ignore_keeps_base_ignore():
    config = resolve_config({"ignore": 42})

    assert config.ignore == DEFAULT_IGNORE
