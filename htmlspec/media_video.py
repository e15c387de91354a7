"""Timed media elements: audio and video players and their text tracks."""

from __future__ import annotations

from htmlspec.model import AttrType, Category, ElementSpec, attr, element

_MEDIA_CHILDREN = ("track", "source")
_MEDIA_CATEGORIES = (
    Category.FLOW,
    Category.PHRASING,
    Category.EMBEDDED,
    Category.INTERACTIVE,
    Category.PALPABLE,
)


def elements() -> tuple[ElementSpec, ...]:
    """Specs for ``<audio>``, ``<track>`` and ``<video>``."""
    return (
        element(
            "audio",
            _MEDIA_CATEGORIES,
            child_tags=_MEDIA_CHILDREN,
            attributes=[
                attr("autoplay", AttrType.BOOL),
                attr("controls", AttrType.BOOL),
                "crossorigin",
                "current_time",
                attr("loop_", AttrType.BOOL),
                attr("muted", AttrType.BOOL),
                "preload",
                "src",
            ],
        ),
        element(
            "track",
            attributes=[
                attr("default", AttrType.BOOL),
                "subtitles",
                "captions",
                "kind",
                "src",
                "srclang",
            ],
        ),
        element(
            "video",
            _MEDIA_CATEGORIES,
            child_tags=_MEDIA_CHILDREN,
            attributes=[
                attr("autoplay", AttrType.BOOL),
                "buffered",
                attr("controls", AttrType.BOOL),
                "crossorigin",
                "current_time",
                "height",
                attr("loop_", AttrType.BOOL),
                attr("muted", AttrType.BOOL),
                attr("playsinline", AttrType.BOOL),
                "poster",
                "preload",
                "src",
                "width",
            ],
        ),
    )