"""Unit tests for contentsync.api.mapping target mapping, ownership and ignore rules."""

from pathlib import Path

import pytest

from contentsync.api.config.SiteOptions import SiteOptions
from contentsync.api.mapping.find_owning_mapping import find_owning_mapping
from contentsync.api.mapping.get_target_path import get_target_path
from contentsync.api.mapping.get_url_for_file import get_url_for_file
from contentsync.api.mapping.is_ignored import is_ignored
from contentsync.api.mapping.SyncMapping import SyncMapping

SITE = SiteOptions(root_dir="/home/sites/astro/my-awesome-site")
MAPPING = SyncMapping(source=Path("/a"), target=Path("/b"), ignored=[])


def test_markdown_goes_to_mapping_target():
    assert get_target_path("/a/sub/doc.md", MAPPING, SITE) == Path("/b/sub/doc.md")


def test_other_files_go_to_public_dir():
    site = SiteOptions(root_dir="/site", public_dir="/pub")
    assert get_target_path("/a/sub/pic.png", MAPPING, site) == Path("/pub/sub/pic.png")


def test_path_outside_source_raises():
    with pytest.raises(ValueError, match="is not under"):
        get_target_path("/elsewhere/doc.md", MAPPING, SITE)


def test_prefix_match_respects_path_boundaries():
    assert find_owning_mapping("/ab/doc.md", [MAPPING]) is None


def test_url_for_non_markdown_is_relative_path():
    assert get_url_for_file("/a/img/pic.png", MAPPING, SITE) == "/img/pic.png"


def test_url_for_markdown_under_content_dir():
    mapping = SyncMapping(source=Path("/vault"), target=SITE.content_dir / "blog", ignored=[])
    assert get_url_for_file("/vault/2024/post.md", mapping, SITE) == "/blog/2024/post"


def test_url_strips_any_markdown_extension():
    mapping = SyncMapping(source=Path("/vault"), target=SITE.content_dir, ignored=[])
    assert get_url_for_file("/vault/notes.markdown", mapping, SITE) == "/notes"


def test_url_for_markdown_with_target_outside_content_dir():
    assert get_url_for_file("/a/sub/doc.md", MAPPING, SITE) == "/sub/doc"


def test_find_owning_mapping_first_match_wins():
    inner = SyncMapping(source=Path("/a/inner"), target=Path("/c"), ignored=[])
    assert find_owning_mapping("/a/inner/x.md", [inner, MAPPING]) is inner
    assert find_owning_mapping("/a/x.md", [inner, MAPPING]) is MAPPING
    assert find_owning_mapping("/z/x.md", [inner, MAPPING]) is None


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/a/draft.tmp", True),
        ("/a/sub/.obsidian/workspace.json", True),
        ("/a/private/secret.md", True),
        ("/a/drafts/post.md", True),
        ("/a/public/post.md", False),
        ("/other/draft.tmp", False),
    ],
)
def test_is_ignored(path, expected):
    mapping = SyncMapping(
        source=Path("/a"),
        target=Path("/b"),
        ignored=["*.tmp", ".obsidian", "private/*", "re:^drafts/"],
    )
    assert is_ignored(path, [mapping]) is expected


def test_source_root_itself_is_never_ignored():
    mapping = SyncMapping(source=Path("/a"), target=Path("/b"), ignored=["*"])
    assert is_ignored("/a", [mapping]) is False


def test_invalid_regex_pattern_is_skipped():
    mapping = SyncMapping(source=Path("/a"), target=Path("/b"), ignored=["re:(unclosed"])
    assert is_ignored("/a/x.md", [mapping]) is False


def test_mapping_is_immutable():
    with pytest.raises(Exception):
        MAPPING.source = Path("/other")  # type: ignore[misc]
