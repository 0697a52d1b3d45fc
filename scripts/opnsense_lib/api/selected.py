"""
Selected-option values as returned by the OPNsense API.

Option fields come back from the router as a dict of every valid choice,
each flagged with whether it is selected, and are sent back as the plain
selected key.
"""

from dataclasses import dataclass, field

from .errors import ConversionError


def _is_selected(flag) -> bool:
    if isinstance(flag, bool):
        return flag
    return str(flag) == "1"


@dataclass
class SelectedMap:
    """A selected option key plus the choices the router offers."""
    value: str = ""
    choices: dict[str, str] = field(default_factory=dict)  # key -> display label

    @classmethod
    def from_api(cls, data) -> 'SelectedMap':
        """
        Parse an option field from an API response.

        Accepts a plain string or the option dict form
        {"lan": {"value": "LAN", "selected": 1}, ...}. Multiple selected
        keys are joined with commas.
        """
        if data is None:
            return cls()
        if isinstance(data, str):
            return cls(value=data)
        if isinstance(data, list) and not data:
            # Empty option lists are serialized as [] by the router
            return cls()
        if not isinstance(data, dict):
            raise ConversionError(f"Unexpected option value: {data!r}")

        selected = []
        choices = {}
        for key, option in data.items():
            if isinstance(option, dict):
                choices[key] = str(option.get("value", key))
                if _is_selected(option.get("selected")):
                    selected.append(key)
            else:
                choices[key] = str(option)
        return cls(value=",".join(selected), choices=choices)

    def to_api(self) -> str:
        """Wire form of the selection."""
        return self.value

    def __str__(self) -> str:
        return self.value
