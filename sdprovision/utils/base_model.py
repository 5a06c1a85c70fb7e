import re
from typing import Any

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict

_ARGS_BLOCK = re.compile(
    r'\n\s*Args:\s*\n(.*?)(?:\n\s*\n|\n\s*[A-Z][a-z]+:|\Z)',
    re.DOTALL,
)
_ARG_LINE = re.compile(r'^\s*(\w+):\s*(.*)$')


def parse_docstring_args(docstring: str | None) -> dict[str, str]:
    """Extract ``name: description`` pairs from a Google style Args block.

    Continuation lines are folded into the description of the preceding
    argument.
    """
    if not docstring:
        return {}

    block = _ARGS_BLOCK.search(docstring)
    if not block:
        return {}

    descriptions: dict[str, list[str]] = {}
    current = None

    for line in block.group(1).split('\n'):
        arg_match = _ARG_LINE.match(line)
        if arg_match:
            current = arg_match.group(1)
            first = arg_match.group(2).strip()
            descriptions[current] = [first] if first else []
        elif current and line.strip():
            descriptions[current].append(line.strip())

    return {
        name: ' '.join(parts).strip()
        for name, parts in descriptions.items()
        if parts
    }


class BaseModel(PydanticBaseModel):
    """Immutable model base for sdprovision.

    Models are frozen value objects. Field descriptions missing from
    ``Field(...)`` are filled in from the Args block of the class docstring.
    """
    model_config = ConfigDict(frozen=True)

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)
        fields = self.__class__.model_fields
        args = parse_docstring_args(self.__class__.__doc__)

        for field_name, description in args.items():
            field_info = fields.get(field_name)
            if field_info is not None and field_info.description is None:
                field_info.description = description
