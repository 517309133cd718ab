"""Python code generator for fragment formats."""

from jinja2 import Environment, PackageLoader

from ..descriptor import FormatSpec, parse_descriptor
from .types import FormatDef
from .util import to_constant_case, to_snake_case

env = Environment(
    loader=PackageLoader("fragstrings.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("python.py.j2")


def _spec(fmt: FormatDef) -> FormatSpec:
    return parse_descriptor(fmt.descriptor)


def _params(spec: FormatSpec) -> str:
    """Typed parameter list for a format function."""
    return ", ".join(
        f"value{i}: {fragment.python_type.__name__}" for i, fragment in enumerate(spec.fragments)
    )


def _args(spec: FormatSpec) -> str:
    return ", ".join(f"value{i}" for i in range(spec.arity))


def _result_type(spec: FormatSpec) -> str:
    """Tuple annotation for a parse function's result."""
    if not spec.fragments:
        return "tuple[()]"
    names = ", ".join(fragment.python_type.__name__ for fragment in spec.fragments)
    return f"tuple[{names}]"


def render(formats: list[FormatDef], runtime_import: str = "fragstrings") -> str:
    """Render format definitions to a Python module."""
    return template.render(
        formats=formats,
        spec=_spec,
        params=_params,
        args=_args,
        result_type=_result_type,
        constant_name=lambda fmt: to_constant_case(fmt.name),
        snake_name=lambda fmt: to_snake_case(fmt.name),
        runtime_import=runtime_import,
        BLANK_LINE="",
    )
