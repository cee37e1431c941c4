from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from http_toolkit.domain.files.interfaces import SNIFF_LEN

DEFAULT_CONTENT_TYPE = "application/octet-stream"
TEXT_UTF8 = "text/plain; charset=utf-8"

_WHITESPACE = b"\t\n\x0c\r "


def _first_non_ws(data: bytes) -> int:
    i = 0
    while i < len(data) and data[i] in _WHITESPACE:
        i += 1
    return i


class _Signature(Protocol):
    def match(self, data: bytes, first_non_ws: int) -> str:
        ...


@dataclass(frozen=True)
class _ExactSig:
    sig: bytes
    ct: str

    def match(self, data: bytes, first_non_ws: int) -> str:
        return self.ct if data.startswith(self.sig) else ""


@dataclass(frozen=True)
class _MaskedSig:
    mask: bytes
    pat: bytes
    ct: str
    skip_ws: bool = False

    def match(self, data: bytes, first_non_ws: int) -> str:
        if self.skip_ws:
            data = data[first_non_ws:]
        if len(self.pat) != len(self.mask) or len(data) < len(self.pat):
            return ""
        for i, p in enumerate(self.pat):
            if data[i] & self.mask[i] != p:
                return ""
        return self.ct


@dataclass(frozen=True)
class _HTMLSig:
    tag: bytes

    def match(self, data: bytes, first_non_ws: int) -> str:
        data = data[first_non_ws:]
        if len(data) < len(self.tag) + 1:
            return ""
        for i, b in enumerate(self.tag):
            db = data[i]
            if ord("A") <= b <= ord("Z"):
                db &= 0xDF
            if b != db:
                return ""
        # tag must be terminated by a space or '>'
        if data[len(self.tag)] not in b" >":
            return ""
        return "text/html; charset=utf-8"


class _MP4Sig:
    def match(self, data: bytes, first_non_ws: int) -> str:
        if len(data) < 12:
            return ""
        box_size = int.from_bytes(data[:4], "big")
        if len(data) < box_size or box_size % 4 != 0:
            return ""
        if data[4:8] != b"ftyp":
            return ""
        for st in range(8, box_size, 4):
            if st == 12:
                # skip the minor version number
                continue
            if data[st:st + 3] == b"mp4":
                return "video/mp4"
        return ""


class _TextSig:
    def match(self, data: bytes, first_non_ws: int) -> str:
        for b in data[first_non_ws:]:
            if b <= 0x08 or b == 0x0B or 0x0E <= b <= 0x1A or 0x1C <= b <= 0x1F:
                return ""
        return TEXT_UTF8


_HTML_TAGS = (
    b"<!DOCTYPE HTML", b"<HTML", b"<HEAD", b"<SCRIPT", b"<IFRAME", b"<H1", b"<DIV", b"<FONT",
    b"<TABLE", b"<A", b"<STYLE", b"<TITLE", b"<B", b"<BODY", b"<BR", b"<P", b"<!--",
)

_SIGNATURES: tuple[_Signature, ...] = (
    *(_HTMLSig(tag) for tag in _HTML_TAGS),
    _MaskedSig(mask=b"\xFF\xFF\xFF\xFF\xFF", pat=b"<?xml", ct="text/xml; charset=utf-8", skip_ws=True),
    _ExactSig(b"%PDF-", "application/pdf"),
    _ExactSig(b"%!PS-Adobe-", "application/postscript"),
    # byte order marks
    _MaskedSig(mask=b"\xFF\xFF\x00\x00", pat=b"\xFE\xFF\x00\x00", ct="text/plain; charset=utf-16be"),
    _MaskedSig(mask=b"\xFF\xFF\x00\x00", pat=b"\xFF\xFE\x00\x00", ct="text/plain; charset=utf-16le"),
    _MaskedSig(mask=b"\xFF\xFF\xFF\x00", pat=b"\xEF\xBB\xBF\x00", ct=TEXT_UTF8),
    # images
    _ExactSig(b"\x00\x00\x01\x00", "image/x-icon"),
    _ExactSig(b"\x00\x00\x02\x00", "image/x-icon"),
    _ExactSig(b"BM", "image/bmp"),
    _ExactSig(b"GIF87a", "image/gif"),
    _ExactSig(b"GIF89a", "image/gif"),
    _MaskedSig(
        mask=b"\xFF\xFF\xFF\xFF\x00\x00\x00\x00\xFF\xFF\xFF\xFF\xFF\xFF",
        pat=b"RIFF\x00\x00\x00\x00WEBPVP",
        ct="image/webp",
    ),
    _ExactSig(b"\x89PNG\x0D\x0A\x1A\x0A", "image/png"),
    _ExactSig(b"\xFF\xD8\xFF", "image/jpeg"),
    # audio and video
    _MaskedSig(
        mask=b"\xFF\xFF\xFF\xFF\x00\x00\x00\x00\xFF\xFF\xFF\xFF",
        pat=b"FORM\x00\x00\x00\x00AIFF",
        ct="audio/aiff",
    ),
    _MaskedSig(mask=b"\xFF\xFF\xFF", pat=b"ID3", ct="audio/mpeg"),
    _MaskedSig(mask=b"\xFF\xFF\xFF\xFF\xFF", pat=b"OggS\x00", ct="application/ogg"),
    _MaskedSig(mask=b"\xFF" * 8, pat=b"MThd\x00\x00\x00\x06", ct="audio/midi"),
    _MaskedSig(
        mask=b"\xFF\xFF\xFF\xFF\x00\x00\x00\x00\xFF\xFF\xFF\xFF",
        pat=b"RIFF\x00\x00\x00\x00AVI ",
        ct="video/avi",
    ),
    _MaskedSig(
        mask=b"\xFF\xFF\xFF\xFF\x00\x00\x00\x00\xFF\xFF\xFF\xFF",
        pat=b"RIFF\x00\x00\x00\x00WAVE",
        ct="audio/wave",
    ),
    _MP4Sig(),
    _ExactSig(b"\x1A\x45\xDF\xA3", "video/webm"),
    # fonts
    _MaskedSig(
        mask=b"\x00" * 34 + b"\xFF\xFF",
        pat=b"\x00" * 34 + b"LP",
        ct="application/vnd.ms-fontobject",
    ),
    _ExactSig(b"\x00\x01\x00\x00", "font/ttf"),
    _ExactSig(b"OTTO", "font/otf"),
    _ExactSig(b"ttcf", "font/collection"),
    _ExactSig(b"wOFF", "font/woff"),
    _ExactSig(b"wOF2", "font/woff2"),
    # archives
    _ExactSig(b"\x1F\x8B\x08", "application/x-gzip"),
    _ExactSig(b"PK\x03\x04", "application/zip"),
    _ExactSig(b"Rar!\x1A\x07\x00", "application/x-rar-compressed"),
    _ExactSig(b"Rar!\x1A\x07\x01\x00", "application/x-rar-compressed"),
    _ExactSig(b"\x00\x61\x73\x6D", "application/wasm"),
    _TextSig(),
)


def detect_content_type(data: bytes) -> str:
    """
    Classify `data` by its leading bytes. Always returns a valid MIME type,
    falling back to application/octet-stream.
    """
    data = data[:SNIFF_LEN]
    first_non_ws = _first_non_ws(data)
    for sig in _SIGNATURES:
        ct = sig.match(data, first_non_ws)
        if ct:
            return ct
    return DEFAULT_CONTENT_TYPE


class MagicByteSniffer:
    def detect(self, data: bytes) -> str:
        return detect_content_type(data)
