"""Rule composition: evaluates the token tree for one cell at a time.

``Rules`` owns the state of a single compilation run: the rule store
(selector -> declaration fragments), the keyframe store, the side-channel
props and the ordered history of visited coordinates.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Sequence

from doodlecss.config import CompilerConfig
from doodlecss.engine.selector import (
    HOST_SELECTOR,
    compose_selector,
    is_cell_selector,
    is_host_selector,
    is_parent_selector,
    is_special_selector,
    normalize_host_alias,
)
from doodlecss.functions import FunctionRegistry, FunctionSpec
from doodlecss.functions import custom_functions as default_custom
from doodlecss.functions import math_functions as default_math
from doodlecss.functions import selector_functions as default_selectors
from doodlecss.model.grid import Coordinate, GridSize
from doodlecss.model.result import CompileResult, Styles
from doodlecss.model.tokens import (
    Argument,
    CondToken,
    FuncNode,
    KeyframesToken,
    PseudoToken,
    RuleToken,
    TextNode,
    Token,
    ValueGroup,
)
from doodlecss.parser import ParseError, parse_value
from doodlecss.properties import TRANSFORMS, PropertyKind, TransformOptions
from doodlecss.properties import prefixer as default_prefixer
from doodlecss.utils import format_number

logger = logging.getLogger(__name__)

_CONTENT_BARE_RE = re.compile(r"[\"']|^none$|^(var|counter|counters|attr)\(")

Thunk = Callable[..., Any]
KeyframeRenderer = Callable[[Coordinate], str]


@dataclass(frozen=True)
class ComposedArgument:
    """A composed function argument; ``cluster`` marks joined multi-part results."""

    value: Any = None
    cluster: bool = False


def _stringify(value: Any) -> str:
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def _block(selector: str, rules: Iterable[str]) -> str:
    body = [r.strip() for r in rules if r and r.strip()]
    if not body:
        return ""
    lines = "".join(f"  {r}\n" for r in body)
    return f"{selector} {{\n{lines}}}\n"


def _declares_host_grid(token: Token) -> bool:
    if not isinstance(token, PseudoToken):
        return False
    selector = normalize_host_alias(token.selector.split(",")[0].strip())
    return is_host_selector(selector) and any(
        s.property == PropertyKind.GRID.value for s in token.styles
    )


def _keyframes(name: str, body: str) -> str:
    return f"@keyframes {name} {{\n{body}\n}}\n"


class Rules:
    """Composes CSS for a token tree, one coordinate per :meth:`compose` call."""

    def __init__(
        self,
        tokens: Iterable[Token],
        *,
        custom: FunctionRegistry | None = None,
        math: FunctionRegistry | None = None,
        selectors: FunctionRegistry | None = None,
        transforms: dict[str, Callable[..., Any]] | None = None,
        prefixer: Callable[[str, str], str] | None = None,
        config: CompilerConfig | None = None,
    ) -> None:
        self.tokens: tuple[Token, ...] = tuple(tokens)
        self.custom = custom if custom is not None else default_custom
        self.math = math if math is not None else default_math
        self.selectors = selectors if selectors is not None else default_selectors
        self.transforms = transforms if transforms is not None else TRANSFORMS
        self.prefixer = prefixer or default_prefixer
        self.config = config or CompilerConfig()

        self.rules: dict[str, list[str]] = {}
        self.props: dict[str, bool] = {}
        self.keyframes: dict[str, KeyframeRenderer] = {}
        self.grid: GridSize | None = None
        self.is_grid_defined = False
        self.coords: list[Coordinate] = []
        self.styles = Styles()
        # special pseudo tokens are emitted once per run, not once per cell
        self._processed: set[int] = set()

    # --- state ----------------------------------------------------------------

    def reset(self) -> None:
        """Drop per-cell rules, output buffers and coordinate history."""
        self.styles = Styles()
        self.coords = []
        for key in [k for k in self.rules if is_cell_selector(k)]:
            del self.rules[key]

    def add_rule(self, selector: str, rule: str | Sequence[str]) -> None:
        bucket = self.rules.setdefault(selector, [])
        if isinstance(rule, str):
            bucket.append(rule)
        else:
            bucket.extend(rule)

    # --- functions --------------------------------------------------------------

    def pick_func(self, name: str) -> FunctionSpec | None:
        return self.custom.resolve(name) or self.math.resolve(name)

    def apply_func(self, spec: FunctionSpec, coord: Coordinate, args: list[Any]) -> Any:
        """Invoke *spec* for *coord* with composed arguments (or thunks if lazy)."""
        fn = spec.bind(coord)
        if spec.lazy:
            return fn(*args)

        extra, position = coord.extra, coord.position
        inputs: list[Any] = []
        for arg in args:
            if not arg.cluster and isinstance(arg.value, str):
                inputs.extend(self._expand(arg.value, coord))
            else:
                inputs.append(arg.value)
        coord.extra, coord.position = extra, position
        return fn(*[v for v in inputs if v is not None and v != ""])

    def _expand(self, text: str, coord: Coordinate) -> list[Any]:
        """Re-parse a textual argument so nested expressions and lists are resolved."""
        if "@" not in text and "," not in text:
            return [text]
        try:
            groups = parse_value(text)
        except ParseError as exc:
            logger.debug("Keeping unparsable argument %r as text: %s", text, exc)
            return [text]
        return [self.compose_value(group, coord) for group in groups]

    def _thunk(self, argument: Argument, coord: Coordinate) -> Thunk:
        def thunk(*extra: Any) -> Any:
            return self.compose_argument(argument, coord, extra).value

        return thunk

    def _build_args(
        self,
        spec: FunctionSpec,
        arguments: Sequence[Argument],
        coord: Coordinate,
        extra: tuple[Any, ...] = (),
    ) -> list[Any]:
        if spec.lazy:
            return [self._thunk(arg, coord) for arg in arguments]
        return [self.compose_argument(arg, coord, extra) for arg in arguments]

    def _call(
        self,
        node: FuncNode,
        spec: FunctionSpec,
        coord: Coordinate,
        extra: tuple[Any, ...] = (),
    ) -> Any:
        args = self._build_args(spec, node.arguments, coord, extra)
        coord.extra = extra
        coord.position = node.position
        return self.apply_func(spec, coord, args)

    # --- composers ------------------------------------------------------------

    def compose_aname(self, *parts: Any) -> str:
        return "-".join(str(p) for p in parts)

    def compose_argument(
        self, argument: Argument, coord: Coordinate, extra: tuple[Any, ...] = ()
    ) -> ComposedArgument:
        parts: list[Any] = []
        for node in argument:
            if isinstance(node, TextNode):
                parts.append(node.value)
            else:
                spec = self.pick_func(node.name)
                parts.append(self._call(node, spec, coord, extra) if spec else None)

        if len(parts) >= 2:
            joined = "".join(_stringify(p) for p in parts if p is not None)
            return ComposedArgument(joined, cluster=True)
        return ComposedArgument(parts[0] if parts else None, argument.cluster)

    def compose_value(self, value: ValueGroup, coord: Coordinate) -> str:
        result = ""
        for node in value:
            if isinstance(node, TextNode):
                result += node.value
                continue
            spec = self.pick_func(node.name)
            if spec is None:
                continue
            output = self._call(node, spec, coord)
            if output is not None:
                result += _stringify(output)
        return result

    def compose_rule(self, token: RuleToken, coord: Coordinate, selector: str = "") -> str:
        """Compose one declaration into CSS text for *selector*."""
        coord = replace(coord)
        prop = token.property
        kind = PropertyKind.of(prop)

        value_group = [v for v in (self.compose_value(g, coord) for g in token.value) if v]
        value = ", ".join(value_group)

        if kind.is_animation:
            self.props["has_animation"] = True
            if coord.grid.count > 1:
                value = ", ".join(self._rename_animation(kind, n, coord.count) for n in value_group)
        elif kind is PropertyKind.CONTENT:
            if not _CONTENT_BARE_RE.search(value):
                value = f"'{value}'"
        elif kind is PropertyKind.TRANSITION:
            self.props["has_transition"] = True

        rule = self.prefixer(prop, f"{prop}: {value};")

        if kind is PropertyKind.CLIP_PATH:
            rule += " overflow: hidden;"

        if kind.is_size and not is_special_selector(selector):
            rule += f" --internal-cell-{prop}: {value};"

        if kind.is_directive and prop in self.transforms:
            rule =self._compose_directive(kind, token, value, coord, selector)

        return rule

    def _rename_animation(self, kind: PropertyKind, value: str, count: int) -> str:
        if kind is PropertyKind.ANIMATION_NAME:
            return self.compose_aname(value, count)
        group = value.split()
        if group:
            group[0] = self.compose_aname(group[0], count)
        return " ".join(group)

    def _compose_directive(
        self,
        kind: PropertyKind,
        token: RuleToken,
        value: str,
        coord: Coordinate,
        selector: str,
    ) -> str:
        transform = self.transforms[token.property]
        options = TransformOptions(
            is_special_selector=is_special_selector(selector),
            max_grid=self.config.max_grid,
        )

        if kind is PropertyKind.GRID:
            directive = transform(value, options)
            rule = ""
            if is_host_selector(selector):
                self.grid = directive.grid
                rule = directive.size
            elif not self.is_grid_defined:
                directive = transform(value, replace(options, is_special_selector=True))
                self.grid = directive.grid
                self.add_rule(HOST_SELECTOR, directive.size)
            self.is_grid_defined = True
            return rule

        if kind is PropertyKind.PLACE_CELL:
            return "" if is_host_selector(selector) else transform(value, options)

        if kind is PropertyKind.USE:
            if token.styles:
                self.compose(coord, token.styles)
            return transform(token.value, options)

        return transform(value, options)

    # --- tree walker ----------------------------------------------------------

    def compose(
        self,
        coord: Coordinate,
        tokens: Sequence[Token] | None = None,
        initial: bool = False,
    ) -> None:
        """Walk *tokens* (the whole tree when omitted) for one coordinate.

        Only whole-tree walks are recorded in the coordinate history. Once the
        discovery walk (``initial``) knows a grid, only host blocks declaring
        ``@grid`` are still processed, so a host grid overrides a cell grid
        regardless of order.
        """
        if tokens is None:
            tokens = self.tokens
            self.coords.append(coord)

        for token in tokens:
            if id(token) in self._processed:
                continue
            if initial and self.grid is not None and not _declares_host_grid(token):
                continue

            if isinstance(token, RuleToken):
                self.add_rule(compose_selector(coord), self.compose_rule(token, coord))
            elif isinstance(token, PseudoToken):
                self._compose_pseudo(token, coord)
            elif isinstance(token, CondToken):
                self._compose_cond(token, coord)
            elif isinstance(token, KeyframesToken):
                self._register_keyframes(token)

    def _compose_pseudo(self, token: PseudoToken, coord: Coordinate) -> None:
        selectors = [normalize_host_alias(s.strip()) for s in token.selector.split(",")]
        special = is_special_selector(selectors[0])
        if special:
            self._processed.add(id(token))

        for selector in selectors:
            composed = [self.compose_rule(s, coord, selector) for s in token.styles]
            target = selector if special else compose_selector(coord, selector)
            self.add_rule(target, composed)

    def _compose_cond(self, token: CondToken, coord: Coordinate) -> None:
        spec = self.selectors.resolve(token.name)
        if spec is None:
            return
        args = self._build_args(spec, token.arguments, coord)
        if self.apply_func(spec, coord, args):
            self.compose(coord, token.styles)

    def _register_keyframes(self, token: KeyframesToken) -> None:
        if token.name in self.keyframes:
            return

        def render(coord: Coordinate) -> str:
            steps = []
            for step in token.steps:
                body = "".join(f"    {self.compose_rule(s, coord)}\n" for s in step.styles)
                steps.append(f"  {step.name} {{\n{body}  }}")
            return "\n".join(steps)

        self.keyframes[token.name] = render

    # --- output ---------------------------------------------------------------

    def output(self, grid: GridSize | None = None) -> CompileResult:
        """Group the rule store into the four style buffers and render keyframes."""
        for selector, rules in self.rules.items():
            if is_parent_selector(selector):
                self.styles.container += _block(".container", rules)
            elif is_host_selector(selector):
                self.styles.host += _block(selector, rules)
            else:
                self.styles.cells += _block(selector, rules)

        names = list(self.keyframes)
        for i, coord in enumerate(self.coords):
            for name in names:
                render = self.keyframes[name]
                if i == 0:
                    self.styles.keyframes += _keyframes(name, render(coord))
                self.styles.keyframes += _keyframes(
                    self.compose_aname(name, coord.count), render(coord)
                )

        return CompileResult(
            styles=self.styles,
            grid=grid or self.grid or GridSize(),
            props=dict(self.props),
        )
