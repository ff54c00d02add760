from pathlib import Path


class PostNotFound(LookupError):
    def __init__(self, category: str, slug: str, reason: str = "not found"):
        super().__init__(f"Post {category}/{slug}: {reason}")
        self.category = category
        self.slug = slug


class FilePostsRepo:
    """Reads ``<root>/<category>/<slug>.md`` files."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def path_for(self, category: str, slug: str) -> Path:
        return self.root / category / f"{slug}.md"

    def load(self, category: str, slug: str) -> str:
        path = self.path_for(category, slug)
        if not path.resolve().is_relative_to(self.root.resolve()):
            raise PostNotFound(category, slug, "outside content root")
        try:
            return path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as e:
            raise PostNotFound(category, slug) from e
        except (OSError, UnicodeDecodeError) as e:
            raise PostNotFound(category, slug, f"unreadable ({e})") from e
