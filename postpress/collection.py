from dataclasses import replace
from pathlib import Path

from postpress.errors import BuildError
from postpress.logger import logger
from postpress.parser import ContentParser, parse_filename


def discover_post_files(posts_dir):
    """Lista los .md del directorio en orden lexicográfico."""
    posts_dir = Path(posts_dir)
    try:
        files = [p for p in posts_dir.iterdir() if p.is_file() and p.suffix == ".md"]
    except OSError as e:
        raise BuildError(f"listing posts: {e}", stage="discover", source=str(posts_dir)) from e
    return sorted(files, key=lambda p: p.name)


def link_posts(posts):
    """
    Ordena por fecha (reciente primero) y enlaza prev/next.
    prev = el post más nuevo contiguo, next = el más antiguo contiguo.
    """
    # Fecha parseada, nunca el nombre de fichero; slug como desempate
    ordered = sorted(posts, key=lambda p: (p.publish_date, p.slug), reverse=True)

    linked = []
    for i, post in enumerate(ordered):
        prev_link = ordered[i - 1].link() if i > 0 else None
        next_link = ordered[i + 1].link() if i < len(ordered) - 1 else None
        linked.append(replace(post, prev=prev_link, next=next_link))
    return linked


def load_posts(posts_dir, parser=None):
    parser = parser or ContentParser()
    posts = []

    for path in discover_post_files(posts_dir):
        parsed = parse_filename(path.name)
        if parsed is None:
            logger.debug(f"Ignorando {path.name}: no sigue el formato YYYY-MM-DD-*.md")
            continue
        publish_date, slug = parsed

        try:
            raw_md = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise BuildError(f"reading file: {e}", stage="read", source=str(path)) from e

        posts.append(parser.parse(raw_md, publish_date, slug))
        logger.info(f"📝 {slug}")

    if not posts:
        raise BuildError(
            f"no post files (YYYY-MM-DD-*.md) found in {posts_dir}",
            stage="discover",
            source=str(posts_dir),
        )

    return link_posts(posts)
