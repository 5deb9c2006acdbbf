from __future__ import annotations

from pydantic import ConfigDict, RootModel, ValidationError

from .errors import FormatError


class KeyboxDoc(RootModel[dict[str, str]]):
    """
    Mirrors the on-disk keybox schema:
      { "<key>": "<value>", ... }

    Values must be JSON strings; numbers, booleans, null and nested data are rejected.
    """

    model_config = ConfigDict(strict=True)

    @classmethod
    def from_disk_text(cls, text: str) -> "KeyboxDoc":
        try:
            return cls.model_validate_json(text)
        except ValidationError as exc:
            raise FormatError("json contents are malformed") from exc

    def to_disk_doc(self) -> dict[str, str]:
        return dict(self.root)

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __len__(self) -> int:
        return len(self.root)

    def get(self, key: str) -> str | None:
        return self.root.get(key)

    def put(self, key: str, value: str) -> None:
        self.root[key] = value

    def remove(self, key: str) -> bool:
        return self.root.pop(key, None) is not None
