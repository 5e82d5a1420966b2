"""Multimodal prompts and the request vocabulary shared by every endpoint.

A prompt is an ordered list of items. The server concatenates them, so order
matters. Each item is tagged on the wire by its ``"type"`` key::

    [{"type": "text", "data": "An apple a day"},
     {"type": "token_ids", "data": [49222, 15], "controls": [{"index": 0, "factor": 2.0}]}]
"""
from __future__ import annotations
import base64
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Iterator, Literal, Union

from pydantic import Field, RootModel, model_validator

from aleph_alpha_api.common.schema import WireModel


class Hosting(str, Enum):
    """
    Datacenters allowed to process a request.

    Leaving ``hosting`` unset lets the API use any datacenter, including servers
    hosted by other providers. ``ALEPH_ALPHA`` restricts processing to the
    vendor's own datacenters.
    """

    ALEPH_ALPHA = "aleph-alpha"


class ControlTokenOverlap(str, Enum):
    """
    How a control that only partly covers a token is applied.

    ``PARTIAL`` scales the factor towards 1 by the covered share of the token;
    ``COMPLETE`` applies the full factor whenever there is any overlap.
    """

    PARTIAL = "partial"
    COMPLETE = "complete"


class BoundingBox(WireModel):
    """Rectangle in image coordinates, all values between 0 and 1."""

    top: float
    left: float
    width: float
    height: float


class TextControl(WireModel):
    """Attention factor for ``length`` characters starting at ``start``."""

    start: int
    length: int
    factor: float
    token_overlap: ControlTokenOverlap | None = None


class ImageControl(WireModel):
    rect: BoundingBox
    factor: float
    token_overlap: ControlTokenOverlap | None = None


class TokenControl(WireModel):
    """Attention factor for the token at ``index``."""

    index: int
    factor: float


class Text(WireModel):
    type: Literal["text"] = "text"
    data: str
    controls: list[TextControl] | None = None


class Image(WireModel):
    """Base64-encoded image. Cropping and format conversion happen server side."""

    type: Literal["image"] = "image"
    data: str
    controls: list[ImageControl] | None = None

    @classmethod
    def from_bytes(cls, image: bytes, controls: list[ImageControl] | None = None) -> Image:
        data = base64.b64encode(image).decode("ascii")
        if controls is None:
            return cls(data=data)
        return cls(data=data, controls=controls)

    @classmethod
    def from_path(cls, path: str | Path, controls: list[ImageControl] | None = None) -> Image:
        return cls.from_bytes(Path(path).read_bytes(), controls)


class TokenIds(WireModel):
    type: Literal["token_ids"] = "token_ids"
    data: list[int]
    controls: list[TokenControl] | None = None


Modality = Annotated[Union[Text, Image, TokenIds], Field(discriminator="type")]


class Prompt(RootModel[list[Modality]]):
    """
    Ordered sequence of prompt items.

    A plain string is accepted wherever a prompt is expected and becomes a
    single text item.
    """

    root: list[Modality] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _coerce_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            return [{"type": "text", "data": data}]
        return data

    @classmethod
    def empty(cls) -> Prompt:
        return cls([])

    @classmethod
    def from_text(cls, text: str, controls: list[TextControl] | None = None) -> Prompt:
        item = Text(data=text) if controls is None else Text(data=text, controls=controls)
        return cls([item])

    @classmethod
    def from_token_ids(cls, token_ids: list[int], controls: list[TokenControl] | None = None) -> Prompt:
        if controls is None:
            return cls([TokenIds(data=token_ids)])
        return cls([TokenIds(data=token_ids, controls=controls)])

    @classmethod
    def from_items(cls, items: list[Text | Image | TokenIds]) -> Prompt:
        return cls(list(items))

    def __iter__(self) -> Iterator[Text | Image | TokenIds]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Text | Image | TokenIds:
        return self.root[index]
