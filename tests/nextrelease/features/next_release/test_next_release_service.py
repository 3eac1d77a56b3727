from __future__ import annotations

import pytest

from nextrelease.changes.parser import parse_changelog
from nextrelease.config import GroupedConfig
from nextrelease.defaults import NEXT_TOKEN
from nextrelease.exceptions.changelog import ChangelogNotFound
from nextrelease.exceptions.config import MissingUserInfo
from nextrelease.exceptions.header_format import MissingReleaserCapability
from nextrelease.features.next_release.next_release_service import NextReleaseService
from nextrelease.features.next_release.protocol import ProjectFile, ProjectInfo
from tests._fakes._project_fakes import FakeAccountReleaser, FakeFiles, FakeReleaser, FakeWriter

# ----------------------------
# Fabrique
# ----------------------------

def _service(clock, text: str | None, *, config: GroupedConfig | None = None, trial: bool = False, **kwargs):
    cfg = config or GroupedConfig(time_zone="UTC", groups=("Security", "Misc"))
    files = FakeFiles(*([ProjectFile(cfg.filename, text, "latin-1")] if text is not None else []))
    writer = FakeWriter()
    svc = NextReleaseService(
        config=cfg,
        files=files,
        project=ProjectInfo(version="1.2.0", is_trial=trial),
        writer=writer,
        clock=clock,
        **kwargs,
    )
    return svc, files, writer


# ----------------------------
# munge_files
# ----------------------------

def test_munge_files_finalizes_content_in_memory(clock, sample_changes):
    svc, files, writer = _service(clock, sample_changes)

    out = svc.munge_files()

    release = parse_changelog(out).latest()
    assert release.version == "1.2.0"
    assert release.date == "2024-03-05 14:30:00 UTC"
    assert release.group_names() == ["Bug Fixes", "Documentation"]
    assert files.files["Changes"].content == out
    assert writer.writes == []


def test_munge_files_missing_changelog_raises(clock):
    svc, files, writer = _service(clock, None)

    with pytest.raises(ChangelogNotFound) as exc:
        svc.munge_files()

    assert exc.value.filename == "Changes"
    assert files.lookups == ["Changes"]


def test_munge_files_uses_configured_filename_and_formats(clock):
    cfg = GroupedConfig(
        filename="CHANGES.md",
        time_zone="UTC",
        format_version="%V",
        format_date="%{%Y-%m-%d}d",
        format_note="by %U <%E>",
    )
    stashes = {"%User": {"name": "Ada", "email": "ada@example.org"}}
    svc, files, _ = _service(clock, "{{$NEXT}}\n    - x\n", config=cfg, trial=True, stashes=stashes)

    out = svc.munge_files()

    assert out == "1.2.0-TRIAL 2024-03-05 by Ada <ada@example.org>\n\n    - x\n"


def test_munge_files_missing_user_info_names_field_and_stash(clock):
    cfg = GroupedConfig(time_zone="UTC", format_note="%U", user_stash="%Author")
    svc, files, _ = _service(clock, "{{$NEXT}}\n", config=cfg, stashes={"%User": {"name": "Ada"}})

    with pytest.raises(MissingUserInfo) as exc:
        svc.munge_files()

    assert exc.value.field == "name"
    assert exc.value.stash == "%Author"
    assert "%Author" in str(exc.value)
    # rien n'a été modifié
    assert files.files["Changes"].content == "{{$NEXT}}\n"


def test_munge_files_percent_p_uses_first_releaser_with_account_id(clock):
    cfg = GroupedConfig(time_zone="UTC", format_note="Released by %P")
    releasers = [FakeReleaser(), FakeAccountReleaser("ADA"), FakeAccountReleaser("BOB")]
    svc, _, _ = _service(clock, "{{$NEXT}}\n", config=cfg, releasers=releasers)

    assert svc.munge_files().startswith("1.2.0 2024-03-05 14:30:00 UTC Released by ADA\n")


def test_munge_files_percent_p_without_capable_releaser(clock):
    cfg = GroupedConfig(time_zone="UTC", format_note="Released by %P")
    svc, _, _ = _service(clock, "{{$NEXT}}\n", config=cfg, releasers=[FakeReleaser()])

    with pytest.raises(MissingReleaserCapability) as exc:
        svc.munge_files()

    assert exc.value.capability == "account_id"


def test_munge_files_without_placeholder_keeps_text(clock):
    text = "1.0.0   2024-01-01\n    - x\n"
    svc, files, _ = _service(clock, text)

    assert svc.munge_files() == text
    assert files.files["Changes"].content == text


# ----------------------------
# after_release
# ----------------------------

def test_after_release_appends_to_munged_text_and_writes(clock, sample_changes):
    svc, files, writer = _service(clock, sample_changes)
    finalized = svc.munge_files()

    # le fichier "stocké" pourrait différer : la phase 2 repart du texte finalisé
    files.files["Changes"].content = "something else entirely\n"
    out = svc.after_release()

    assert out == append_expected(finalized)
    assert writer.writes == [("Changes", "latin-1", out)]


def append_expected(finalized: str) -> str:
    return finalized.replace("1.2.0 ", "{{$NEXT}}\n\n    [Security]\n\n    [Misc]\n\n1.2.0 ", 1)


def test_after_release_without_munge_uses_stored_text(clock):
    svc, _, writer = _service(clock, "1.0.0\n    - x\n")

    out = svc.after_release()

    assert out == "{{$NEXT}}\n\n    [Security]\n\n    [Misc]\n\n1.0.0\n\n    - x\n"
    assert writer.writes[0][2] == out


def test_after_release_missing_file_raises_without_writing(clock):
    svc, _, writer = _service(clock, None)

    with pytest.raises(ChangelogNotFound):
        svc.after_release()

    assert writer.writes == []


def test_after_release_twice_adds_two_placeholder_releases(clock):
    svc, files, writer = _service(clock, "1.0.0\n")

    svc.after_release()
    files.files["Changes"].content = writer.writes[-1][2]
    svc.after_release()

    versions = [r.version for r in parse_changelog(writer.writes[-1][2])]
    assert versions == ["1.0.0", NEXT_TOKEN, NEXT_TOKEN]


# ----------------------------
# Collaborateurs
# ----------------------------

def test_user_info_reads_configured_stash(clock):
    svc, _, _ = _service(clock, "", stashes={"%User": {"name": "Ada", "email": "a@b.c"}})

    assert svc.user_info("name") == "Ada"
    assert svc.user_info("email") == "a@b.c"


def test_user_info_missing_stash(clock):
    svc, _, _ = _service(clock, "")

    with pytest.raises(MissingUserInfo) as exc:
        svc.user_info("email")

    assert exc.value.field == "email"
    assert exc.value.stash == "%User"


def test_format_context_reflects_project_and_config(clock):
    svc, _, _ = _service(clock, "", trial=True)

    ctx = svc.format_context()

    assert ctx.version == "1.2.0"
    assert ctx.is_trial is True
    assert ctx.time_zone == "UTC"
    assert ctx.clock is clock
