"""Tests for the decorator registry and spec-driven chain assembly."""

from __future__ import annotations

from typing import ClassVar

import pytest

from notichain.domain.chain import (
    DECORATOR_REGISTRY,
    DecoratorSpec,
    build_chain,
    get_decorator,
    is_builtin,
    parse_decorator_spec,
    register_decorator,
    unregister_decorator,
)
from notichain.domain.decorators import EmojiDecorator, TimestampDecorator, UrgentDecorator
from notichain.domain.errors import ChainConstructionError, UnknownDecoratorError
from notichain.domain.notifier import NotifierDecorator, SimpleNotifier, chain_depth
from tests.conftest import FIXED_STAMP, fixed_clock


class _Suffix(NotifierDecorator):
    label: ClassVar[str] = "Suffix"
    primary_option: ClassVar[str] = "suffix"

    def __init__(self, wrapped, suffix: str = ".") -> None:
        super().__init__(wrapped)
        self.suffix = suffix

    def transform(self, message: str) -> str:
        return message + self.suffix


class TestRegistry:
    def test_builtins_present(self) -> None:
        assert DECORATOR_REGISTRY["timestamp"] is TimestampDecorator
        assert DECORATOR_REGISTRY["urgent"] is UrgentDecorator
        assert DECORATOR_REGISTRY["emoji"] is EmojiDecorator
        assert is_builtin("urgent")

    def test_register_custom(self) -> None:
        register_decorator("suffix", _Suffix)
        assert get_decorator("suffix") is _Suffix
        assert not is_builtin("suffix")

    def test_register_strips_name(self) -> None:
        register_decorator("  suffix ", _Suffix)
        assert "suffix" in DECORATOR_REGISTRY

    def test_register_same_class_twice_is_noop(self) -> None:
        register_decorator("suffix", _Suffix)
        register_decorator("suffix", _Suffix)
        assert get_decorator("suffix") is _Suffix

    def test_register_conflicting_class_rejected(self) -> None:
        class _Other(_Suffix):
            pass

        register_decorator("suffix", _Suffix)
        with pytest.raises(ValueError, match="already registered"):
            register_decorator("suffix", _Other)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            register_decorator("   ", _Suffix)

    def test_builtin_name_reserved(self) -> None:
        with pytest.raises(ValueError, match="built-in"):
            register_decorator("urgent", _Suffix)

    def test_non_decorator_rejected(self) -> None:
        with pytest.raises(TypeError, match="NotifierDecorator"):
            register_decorator("bad", SimpleNotifier)  # type: ignore[arg-type]

    def test_unregister(self) -> None:
        register_decorator("suffix", _Suffix)
        unregister_decorator("suffix")
        assert "suffix" not in DECORATOR_REGISTRY

    def test_unregister_builtin_rejected(self) -> None:
        with pytest.raises(ValueError):
            unregister_decorator("emoji")

    def test_unknown_lookup(self) -> None:
        with pytest.raises(UnknownDecoratorError) as exc_info:
            get_decorator("sparkle")
        assert exc_info.value.name == "sparkle"
        assert isinstance(exc_info.value, KeyError)
        assert "sparkle" in str(exc_info.value)


class TestParseDecoratorSpec:
    def test_bare_name(self) -> None:
        assert parse_decorator_spec("urgent") == DecoratorSpec(name="urgent")

    def test_emoji_argument(self) -> None:
        spec = parse_decorator_spec("emoji:🚨")
        assert spec.options == {"emoji": "🚨"}

    def test_timestamp_format_keeps_colons(self) -> None:
        spec = parse_decorator_spec("timestamp:%H:%M:%S")
        assert spec.options == {"fmt": "%H:%M:%S"}

    def test_argument_for_optionless_decorator_rejected(self) -> None:
        with pytest.raises(ChainConstructionError, match="does not accept"):
            parse_decorator_spec("urgent:loud")

    @pytest.mark.parametrize("text", ["emoji:", "timestamp:"])
    def test_empty_argument_rejected(self, text: str) -> None:
        with pytest.raises(ChainConstructionError, match="needs a value"):
            parse_decorator_spec(text)

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownDecoratorError):
            parse_decorator_spec("sparkle:x")

    def test_spec_is_frozen(self) -> None:
        spec = DecoratorSpec(name="urgent")
        with pytest.raises(Exception):
            spec.name = "emoji"  # type: ignore[misc]


class TestBuildChain:
    def test_empty_specs_returns_terminal(self, terminal: SimpleNotifier) -> None:
        assert build_chain(terminal, []) is terminal

    def test_specs_listed_innermost_first(self, terminal: SimpleNotifier) -> None:
        chain = build_chain(terminal, ["timestamp", "urgent"])
        assert chain.describe() == "UrgentDecorator(TimestampDecorator(SimpleNotifier))"
        assert chain_depth(chain) == 2

    def test_defaults_apply_beneath_spec_options(
        self, terminal: SimpleNotifier, outbox: list[str]
    ) -> None:
        chain = build_chain(
            terminal,
            ["emoji", "emoji:⚡", "timestamp"],
            defaults={
                "emoji": {"emoji": "📣"},
                "timestamp": {"clock": fixed_clock},
            },
        )
        chain.send("hello")
        assert outbox == [f"📣 ⚡ [{FIXED_STAMP}] hello"]

    def test_accepts_spec_models(self, terminal: SimpleNotifier, outbox: list[str]) -> None:
        chain = build_chain(terminal, [DecoratorSpec(name="emoji", options={"emoji": "✅"})])
        chain.send("done")
        assert outbox == ["✅ done"]

    def test_custom_decorator(self, terminal: SimpleNotifier, outbox: list[str]) -> None:
        register_decorator("suffix", _Suffix)
        build_chain(terminal, ["suffix:!!", "urgent"]).send("go")
        assert outbox == ["URGENT: GO!!"]

    def test_bad_options_become_construction_error(self, terminal: SimpleNotifier) -> None:
        with pytest.raises(ChainConstructionError, match="Invalid options"):
            build_chain(terminal, [DecoratorSpec(name="urgent", options={"volume": 11})])

    def test_unknown_decorator(self, terminal: SimpleNotifier) -> None:
        with pytest.raises(UnknownDecoratorError):
            build_chain(terminal, ["urgent", "sparkle"])
