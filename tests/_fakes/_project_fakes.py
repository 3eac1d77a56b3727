from __future__ import annotations

from nextrelease.features.next_release.protocol import ProjectFile


class FakeFiles:
    def __init__(self, *files: ProjectFile):
        self.files = {f.name: f for f in files}
        self.lookups: list[str] = []

    def find(self, name: str) -> ProjectFile | None:
        self.lookups.append(name)
        return self.files.get(name)


class FakeWriter:
    def __init__(self):
        self.writes: list[tuple[str, str, str]] = []

    def write(self, filename: str, encoding: str, text: str) -> None:
        self.writes.append((filename, encoding, text))


class FakeReleaser:
    """Releaser sans identifiant de compte (ex: upload vers un dépôt privé)."""

    def release(self) -> None:
        pass


class FakeAccountReleaser:
    def __init__(self, account_id: str):
        self.account_id = account_id
