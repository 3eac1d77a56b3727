"""Service métier qui applique les deux phases du changelog groupé autour d'une release."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from nextrelease.changes.header_format import FormatContext
from nextrelease.changes.operations import HeaderFormats, append_next_release, finalize_next_release
from nextrelease.config import GroupedConfig
from nextrelease.defaults import RELEASER_CAPABILITY
from nextrelease.exceptions.changelog import ChangelogNotFound
from nextrelease.exceptions.config import MissingUserInfo
from nextrelease.exceptions.header_format import MissingReleaserCapability
from nextrelease.features.next_release.protocol import ChangelogWriter, ProjectFile, ProjectFiles, ProjectInfo
from nextrelease.utils.timestamp import now_in

log = logging.getLogger(__name__)


@dataclass(slots=True)
class NextReleaseService:
    """Finalise la prochaine release avant publication, puis prépare la suivante après publication.

    Le texte finalisé est conservé en mémoire entre les deux phases : `after_release` repart de ce
    texte plutôt que de relire le fichier.
    """

    config: GroupedConfig
    files: ProjectFiles
    project: ProjectInfo
    writer: ChangelogWriter
    stashes: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    releasers: Sequence[object] = ()
    clock: Callable[[tzinfo], datetime] = now_in
    _changes_after_munging: str | None = field(default=None, init=False)

    # ------------ Collaborateurs -----------

    def require_file(self) -> ProjectFile:
        """Retourne le fichier de changelog du projet. Lève une exception s'il est absent."""
        file = self.files.find(self.config.filename)
        if file is None:
            raise ChangelogNotFound(self.config.filename)
        return file

    def user_info(self, field_name: str) -> str:
        """Retourne une information utilisateur (`name`, `email`) depuis le stash configuré."""
        stash = self.stashes.get(self.config.user_stash) or {}
        value = stash.get(field_name)
        if not value:
            raise MissingUserInfo(field_name, self.config.user_stash, str(self.config.stash_file))
        return value

    def releaser_id(self) -> str:
        """Retourne l'identifiant de compte du premier releaser capable d'en fournir un."""
        for releaser in self.releasers:
            if hasattr(releaser, RELEASER_CAPABILITY):
                return getattr(releaser, RELEASER_CAPABILITY)
        raise MissingReleaserCapability(RELEASER_CAPABILITY)

    def format_context(self) -> FormatContext:
        """Construit le contexte de rendu des en-têtes pour cette invocation."""
        return FormatContext(
            version=self.project.version,
            is_trial=self.project.is_trial,
            time_zone=self.config.time_zone,
            user_info=self.user_info,
            releaser_id=self.releaser_id,
            clock=self.clock,
        )

    # ------------ Phases -----------

    def munge_files(self) -> str:
        """Phase avant release : finalise l'en-tête `{{$NEXT}}` et retire les groupes vides, en mémoire."""
        file = self.require_file()
        formats = HeaderFormats(
            version=self.config.format_version,
            date=self.config.format_date,
            note=self.config.format_note,
        )

        content = finalize_next_release(file.content, formats, self.format_context())

        log.debug("Nettoyage de %s en mémoire", file.name)
        file.content = content
        self._changes_after_munging = content
        return content

    def after_release(self) -> str:
        """Phase après release : ajoute une release `{{$NEXT}}` avec les groupes configurés et écrit le fichier."""
        file = self.require_file()
        text = self._changes_after_munging
        if text is None:
            text = file.content

        content = append_next_release(text, self.config.groups)

        self.writer.write(self.config.filename, file.encoding, content)
        log.info("%s mis à jour avec %d groupe(s) pour la prochaine release", self.config.filename, len(self.config.groups))
        return content
