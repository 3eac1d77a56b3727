"""Point d'entrée en ligne de commande de nextrelease.

Usage:
  nextrelease preview 1.2.0 [--trial]     affiche le changelog finalisé, sans rien écrire
  nextrelease roll 1.2.0 [--trial]        finalise la release puis prépare la suivante
  nextrelease after-release               ajoute une release {{$NEXT}} au changelog
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from nextrelease.app.steps import step
from nextrelease.config import GroupedConfig, load_config
from nextrelease.exceptions.base import AppError
from nextrelease.features.next_release.next_release_service import NextReleaseService
from nextrelease.features.next_release.project import AccountReleaser, DirectoryFiles, FileWriter, load_stashes
from nextrelease.features.next_release.protocol import ProjectInfo
from nextrelease.utils.logging import setup_logging
from nextrelease.version import VERSION

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Construit le parseur d'arguments de la ligne de commande."""
    parser = argparse.ArgumentParser(prog="nextrelease", description="Gestion d'un changelog groupé autour des releases.")
    parser.add_argument("--version", action="version", version=f"nextrelease {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="affiche les logs de debug")
    parser.add_argument("-C", "--directory", type=Path, default=Path("."), help="dossier racine du projet")

    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("preview", "affiche le changelog finalisé sans rien écrire"),
        ("roll", "finalise la release puis ajoute la suivante"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("release_version", metavar="VERSION")
        cmd.add_argument("--trial", action="store_true", help="release de test (trial)")

    sub.add_parser("after-release", help="ajoute une release {{$NEXT}} avec les groupes configurés")
    return parser


def build_service(config: GroupedConfig, root: Path, project: ProjectInfo) -> NextReleaseService:
    """Assemble le service avec les collaborateurs locaux (fichiers du dossier, stash INI, releaser)."""
    releasers = [AccountReleaser(config.releaser_id)] if config.releaser_id else []
    return NextReleaseService(
        config=config,
        files=DirectoryFiles(root),
        project=project,
        writer=FileWriter(root),
        stashes=load_stashes(config.stash_file),
        releasers=releasers,
    )


def run(args: argparse.Namespace, config: GroupedConfig) -> int:
    """Exécute la commande demandée."""
    version = getattr(args, "release_version", "")
    project = ProjectInfo(version=version, is_trial=getattr(args, "trial", False))
    service = build_service(config, args.directory, project)

    if args.command == "preview":
        # Pas de step() ici : stdout ne doit contenir que le changelog.
        sys.stdout.write(service.munge_files())
        return 0

    if args.command == "roll":
        step("Finalisation du changelog", service.munge_files, label=f"{config.filename} → {version}")

    step("Ajout de la prochaine release", service.after_release, label=", ".join(config.groups))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse les arguments, charge la configuration et lance la commande. Retourne le code de sortie."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        return run(args, load_config())
    except AppError as e:
        log.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
