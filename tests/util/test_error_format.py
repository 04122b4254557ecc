import pytest
from pydantic import ValidationError

from emmet_volt.lsp.errors import HostError, InvalidURIError, ToolMissingError
from emmet_volt.lsp.types import InitializeParams
from emmet_volt.util.error import describe_error, format_error, format_unknown_error


def test_known_plugin_errors() -> None:
    assert format_error(HostError("VOLT_URI", "environment variable not present")) == (
        "host query failed (VOLT_URI: environment variable not present)"
    )
    assert format_error(InvalidURIError("emmet", "relative URL without a base")) == (
        "invalid URI 'emmet': relative URL without a base"
    )
    assert format_error(ToolMissingError("npm", "exit code 1")) == "npm is not available: exit code 1"


def test_validation_error_lists_fields() -> None:
    with pytest.raises(ValidationError) as excinfo:
        InitializeParams.model_validate({"processId": "x"})

    text = format_error(excinfo.value)

    assert text is not None
    assert text.startswith("invalid initialize params: processId: ")


def test_unknown_errors_fall_back() -> None:
    assert format_error(KeyError("lsp")) is None
    assert describe_error(RuntimeError("boom")) == "RuntimeError: boom"
    assert format_unknown_error(RuntimeError()) == "RuntimeError"
    assert format_unknown_error({"code": 1}) == '{"code": 1}'
    assert format_unknown_error(3) == "3"
