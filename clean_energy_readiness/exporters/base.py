"""Export file container and number formatting shared by the exporters."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

@dataclass(frozen=True)
class ExportFile:
    """A downloadable export: file name, MIME type and encoded payload."""
    filename: str
    mime_type: str
    payload: bytes

    @property
    def text(self) -> str:
        return self.payload.decode('utf-8')

    def write(self, directory: Union[str, Path]) -> Path:
        """Write the payload into ``directory`` and return the file path."""
        path = Path(directory) / self.filename
        path.write_bytes(self.payload)
        return path

def number_value(value: float) -> Union[int, float]:
    """Integral values as int (74.0 -> 74), everything else as float."""
    value = float(value)
    return int(value) if value.is_integer() else value

def format_number(value: float) -> str:
    """Render a number the way the dashboard displays it."""
    return str(number_value(value))
