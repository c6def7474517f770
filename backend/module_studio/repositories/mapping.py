"""
Translation between the flat ``modules`` row and the nested bilingual entity.

These two functions are the only place that knows the column layout.
"""
from typing import Any, Dict
from ..models.module import Module as ModuleRow
from ..schemas.module import Module, ModuleContent
from ..validation import optional_text
from ..utils import as_utc

LANGUAGES = ("en", "kn")


def row_to_module(row: ModuleRow) -> Module:
    """Map a stored row to the nested entity"""
    contents = {
        lang: ModuleContent(
            name=getattr(row, f"{lang}_name"),
            description=getattr(row, f"{lang}_description"),
            input_placeholder=getattr(row, f"{lang}_input_placeholder"),
        )
        for lang in LANGUAGES
    }
    return Module(
        id=row.id,
        prompt=row.prompt,
        en=contents["en"],
        kn=contents["kn"],
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


def module_to_columns(data: Any) -> Dict[str, Any]:
    """
    Map validated content fields to the seven content columns.

    Prompt and names are trimmed; empty optional text becomes NULL.
    """
    columns = {"prompt": data.prompt.strip()}
    for lang in LANGUAGES:
        content = getattr(data, lang)
        columns[f"{lang}_name"] = content.name.strip()
        columns[f"{lang}_description"] = optional_text(content.description)
        columns[f"{lang}_input_placeholder"] = optional_text(content.input_placeholder)
    return columns
