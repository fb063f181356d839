"""
Content output modes.

Part of REC-5: Request/response content reconstruction

OutputOptions is the raw flag set understood by the content renderer.
ContentMode enumerates the six legal combinations exposed over HTTP, so
routes never build a flag set by hand.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

EMBED_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass(frozen=True)
class OutputOptions:
    """Independent output flags for content rendering."""

    wire: bool = False
    embed: bool = False
    request_body: bool = False
    response_body: bool = False

    @property
    def is_none(self) -> bool:
        return not (self.wire or self.embed or self.request_body or self.response_body)


class MessagePart(str, Enum):
    REQUEST = "request"
    RESPONSE = "response"


class Presentation(str, Enum):
    CONTENT = "content"  # body only, as attachment
    RAW = "raw"  # wire headers + body, as attachment
    EMBED = "embed"  # body only, inline


class ContentMode(Enum):
    """The six content variants served for a record."""

    REQUEST_CONTENT = (MessagePart.REQUEST, Presentation.CONTENT)
    REQUEST_RAW = (MessagePart.REQUEST, Presentation.RAW)
    REQUEST_EMBED = (MessagePart.REQUEST, Presentation.EMBED)
    RESPONSE_CONTENT = (MessagePart.RESPONSE, Presentation.CONTENT)
    RESPONSE_RAW = (MessagePart.RESPONSE, Presentation.RAW)
    RESPONSE_EMBED = (MessagePart.RESPONSE, Presentation.EMBED)

    @property
    def part(self) -> MessagePart:
        return self.value[0]

    @property
    def presentation(self) -> Presentation:
        return self.value[1]

    @classmethod
    def lookup(cls, part: MessagePart, presentation: Presentation) -> "ContentMode":
        return cls((part, presentation))

    def options(self) -> OutputOptions:
        """Return the flag set this mode stands for."""
        return OutputOptions(
            wire=self.presentation is Presentation.RAW,
            embed=self.presentation is Presentation.EMBED,
            request_body=self.part is MessagePart.REQUEST,
            response_body=self.part is MessagePart.RESPONSE,
        )


@dataclass(frozen=True)
class RenderedContent:
    """
    A reconstructed byte stream plus how to present it.

    Inline content has no filename. Attachments carry a download filename
    and the record's end timestamp as last-modified marker; their media
    type is guessed from the filename unless set here.
    """

    content: bytes
    media_type: Optional[str] = None
    filename: Optional[str] = None
    last_modified: Optional[datetime] = None

    @property
    def is_attachment(self) -> bool:
        return self.filename is not None
