"""Render chardata with symbolic style names into ANSI escape sequences.

Chardata is a nested structure of:

* ``str`` - literal text, or a pre-formed escape sequence when it starts
  with ``ESC [``,
* ``int`` - a single codepoint,
* ``StyleToken`` or ``Style`` - a symbolic name resolved through the theme
  and the built-in table,
* ``list`` / ``tuple`` - further chardata.

Example::

    >>> theme = {"orange": color(5, 3, 0), "say": StyleToken("orange")}
    >>> format([StyleToken("say"), "hello"], theme=theme, emit=True)
    '\\x1b[38;5;214mhello\\x1b[0m'
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from termescape.console import enabled
from termescape.exceptions import CyclicSequenceError, UnknownSequenceError
from termescape.sequences import Style, is_sequence, sequence
from termescape.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StyleToken:
    """A symbolic style name, looked up in the theme or the style table."""

    name: str

    def __post_init__(self) -> None:
        if isinstance(self.name, Style):
            object.__setattr__(self, "name", self.name.value)


class ResetPolicy(str, Enum):
    """When to append the trailing reset sequence."""

    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"


Token = Union[StyleToken, Style]
Chardata = Any
Theme = Mapping[Any, Any]


def token_name(token: Any) -> str | None:
    """Return the name of a token, or None when the value is not a token."""
    if isinstance(token, Style):
        return token.value
    if isinstance(token, StyleToken):
        return token.name
    return None


def normalize_theme(theme: Theme | None) -> dict[str, Any] | None:
    """Key a theme by plain names so Style and StyleToken keys match."""
    if theme is None:
        return None
    return {(token_name(key) or key): value for key, value in theme.items()}


def resolve_reset(reset: bool | str | ResetPolicy | None, emit: bool) -> ResetPolicy:
    """Map the ``reset`` option onto a ResetPolicy."""
    if not emit:
        return ResetPolicy.NEVER
    if reset is None:
        return ResetPolicy.AUTO
    if reset is True:
        return ResetPolicy.ALWAYS
    if reset is False:
        return ResetPolicy.NEVER
    return ResetPolicy(reset)


def _leaves(chardata: Chardata) -> Iterator[Any]:
    """Yield the leaves of chardata left to right, depth first."""
    stack = [iter((chardata,))]
    while stack:
        for node in stack[-1]:
            if isinstance(node, (list, tuple)):
                stack.append(iter(node))
                break
            yield node
        else:
            stack.pop()


def _text(leaf: Any) -> str:
    if isinstance(leaf, str):
        return leaf
    if isinstance(leaf, int) and not isinstance(leaf, bool):
        return chr(leaf)
    raise TypeError(f"invalid chardata: {leaf!r}")


def _pieces(
    chardata: Chardata,
    theme: dict[str, Any] | None,
    emit: bool,
    path: frozenset[str],
) -> Iterator[tuple[str, bool]]:
    """Yield ``(piece, is_style)`` pairs for chardata."""
    for leaf in _leaves(chardata):
        name = token_name(leaf)
        if name is not None:
            if emit:
                yield _resolve(name, theme, path), True
            continue

        text = _text(leaf)
        if is_sequence(text):
            if emit:
                yield text, True
        else:
            yield text, False


def _resolve(name: str, theme: dict[str, Any] | None, path: frozenset[str]) -> str:
    """Resolve a symbolic name to its escape sequence.

    ``path`` holds the names already visited by the resolution that led
    here, so composite entries share the cycle check of their parent.
    """
    if name in path:
        logger.debug(f"Theme name {name!r} reached again through a composite entry")
        raise CyclicSequenceError(name)

    seen = set(path)
    seen.add(name)
    current = name

    while theme is not None and current in theme:
        entry = theme[current]
        alias = token_name(entry)

        if alias is not None:
            if alias in seen:
                logger.debug(f"Theme alias {alias!r} revisited while resolving {name!r}")
                raise CyclicSequenceError(name)
            seen.add(alias)
            current = alias
        elif isinstance(entry, str):
            return entry
        elif isinstance(entry, (list, tuple)):
            try:
                return "".join(
                    piece for piece, _ in _pieces(entry, theme, True, frozenset(seen))
                )
            except CyclicSequenceError as e:
                raise CyclicSequenceError(name) from e
        else:
            raise TypeError(f"invalid theme entry for {current!r}: {entry!r}")

    try:
        return sequence(current)
    except UnknownSequenceError:
        logger.debug(f"No theme entry or built-in sequence for {current!r} (requested {name!r})")
        raise


def iter_render(
    chardata: Chardata,
    theme: Theme | None = None,
    emit: bool | None = None,
    reset: bool | str | ResetPolicy | None = None,
) -> Iterator[str]:
    """Lazily render chardata into output pieces.

    Errors surface while iterating; use ``render`` or ``format`` to get
    all-or-nothing behaviour.

    Args:
        chardata: Nested literal text and style tokens.
        theme: Mapping from names to sequences, aliases or chardata.
        emit: Emit escape sequences. Defaults to ``console.enabled()``.
        reset: ``True``, ``False``, a ResetPolicy, or None for auto.

    Yields:
        Text and escape sequence pieces in traversal order.
    """
    if emit is None:
        emit = enabled()
    policy = resolve_reset(reset, emit)

    styled = False
    for piece, is_style in _pieces(chardata, normalize_theme(theme), emit, frozenset()):
        styled = styled or is_style
        yield piece

    if styled and policy is not ResetPolicy.NEVER:
        yield sequence(Style.RESET)


def render(
    chardata: Chardata,
    theme: Theme | None = None,
    emit: bool | None = None,
    reset: bool | str | ResetPolicy | None = None,
) -> list[str]:
    """Render chardata into a flat list of pieces.

    Raises:
        UnknownSequenceError: A name is neither in the theme nor built in.
        CyclicSequenceError: Theme aliases loop back on themselves.
    """
    return list(iter_render(chardata, theme=theme, emit=emit, reset=reset))


def format(
    chardata: Chardata,
    theme: Theme | None = None,
    emit: bool | None = None,
    reset: bool | str | ResetPolicy | None = None,
) -> str:
    """Render chardata into a single string."""
    return "".join(render(chardata, theme=theme, emit=emit, reset=reset))


def colorizer(**opts: Any) -> Callable[[str, Token], str]:
    """Return ``f(text, token)`` that formats ``[token, text]`` with opts.

    Example::

        >>> colorize = colorizer(theme={"say": Style.GREEN}, emit=True)
        >>> colorize("hello", StyleToken("say"))
        '\\x1b[32mhello\\x1b[0m'
    """

    def colorize(text: str, token: Token) -> str:
        return format([token, text], **opts)

    return colorize


def formatter(**opts: Any) -> Callable[[Chardata], str]:
    """Return ``f(chardata)`` that formats chardata with opts."""

    def apply(chardata: Chardata) -> str:
        return format(chardata, **opts)

    return apply
