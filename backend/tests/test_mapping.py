from datetime import datetime, timezone

from module_studio.models import Module as ModuleRow
from module_studio.repositories import module_to_columns, row_to_module
from module_studio.schemas import ModuleContent, ModulePayload


def _row(**overrides):
    columns = {
        "id": 5,
        "prompt": "Translate:",
        "en_name": "Translator",
        "en_description": "Translate text",
        "en_input_placeholder": None,
        "kn_name": "ಅನುವಾದಕ",
        "kn_description": None,
        "kn_input_placeholder": "ಪಠ್ಯ...",
        "created_at": datetime(2024, 1, 1, 12, 0, 0),
        "updated_at": datetime(2024, 1, 2, 8, 30, 0),
    }
    columns.update(overrides)
    return ModuleRow(**columns)


def test_row_to_module_nests_languages():
    module = row_to_module(_row())

    assert module.id == 5
    assert module.prompt == "Translate:"
    assert module.en == ModuleContent(name="Translator", description="Translate text", input_placeholder=None)
    assert module.kn.name == "ಅನುವಾದಕ"
    assert module.kn.description is None
    assert module.kn.input_placeholder == "ಪಠ್ಯ..."
    assert module.created_at == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert module.updated_at == datetime(2024, 1, 2, 8, 30, 0, tzinfo=timezone.utc)


def test_wire_shape_uses_camel_case_and_null():
    wire = row_to_module(_row()).to_wire()

    assert set(wire) == {"id", "prompt", "en", "kn", "createdAt", "updatedAt"}
    assert wire["en"] == {"name": "Translator", "description": "Translate text", "inputPlaceholder": None}
    assert wire["createdAt"] == "2024-01-01T12:00:00Z"
    assert wire["updatedAt"] == "2024-01-02T08:30:00Z"


def test_module_to_columns_flattens_and_normalizes(module_payload):
    module_payload["prompt"] = "  Summarize:  "
    module_payload["en"]["name"] = " Summarizer "
    module_payload["en"]["description"] = ""
    module_payload["kn"]["inputPlaceholder"] = None

    columns = module_to_columns(ModulePayload.model_validate(module_payload))

    assert columns == {
        "prompt": "Summarize:",
        "en_name": "Summarizer",
        "en_description": None,
        "en_input_placeholder": "Paste text here...",
        "kn_name": "ಸಾರಾಂಶ",
        "kn_description": "ಪಠ್ಯವನ್ನು ಸಾರಾಂಶಗೊಳಿಸಿ",
        "kn_input_placeholder": None,
    }


def test_columns_round_trip_through_row(module_payload):
    payload = ModulePayload.model_validate(module_payload)
    row = _row(**module_to_columns(payload))

    module = row_to_module(row)

    assert module.prompt == payload.prompt
    assert module.en.model_dump() == payload.en.model_dump()
    assert module.kn.model_dump() == payload.kn.model_dump()


def test_aware_timestamps_are_kept():
    stamp = datetime(2024, 3, 4, 5, 6, 7, 891011, tzinfo=timezone.utc)

    module = row_to_module(_row(created_at=stamp, updated_at=stamp))

    assert module.created_at == stamp
    assert module.to_wire()["updatedAt"] == "2024-03-04T05:06:07.891011Z"
