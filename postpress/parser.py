import re
from datetime import datetime

import markdown

from postpress.errors import BuildError
from postpress.models import Post

UNTITLED = "Untitled"
DESC_MAX_LEN = 200
DESC_MIN_CUT = 100
TITLE_WINDOW = 100
ELLIPSIS = "…"

H1_RE = re.compile(r'^# (.+)\n*', re.MULTILINE)
POST_FILE_RE = re.compile(r'([0-9]{4}-[0-9]{2}-[0-9]{2})-(.+)\.md')


def parse_filename(name):
    """
    Decodifica 'YYYY-MM-DD-slug.md' en (fecha, slug).
    Devuelve None si el nombre no sigue la convención (no es un post).
    Una fecha imposible (p.ej. 2024-02-30) es un error fatal.
    """
    m = POST_FILE_RE.fullmatch(name)
    if m is None:
        return None

    try:
        publish_date = datetime.strptime(m.group(1), "%Y-%m-%d").date()
    except ValueError as e:
        raise BuildError(f"parsing date: {e}", stage="parse", source=name) from e

    # El slug conserva el prefijo de fecha
    return publish_date, name[:-len(".md")]


def _is_boundary(line):
    # Línea vacía, encabezado o bloque de código
    return line == "" or line.startswith("#") or line.startswith("```")


def extract_title(text):
    m = H1_RE.search(text)
    if m:
        return m.group(1).strip()
    return UNTITLED


def strip_first_h1(text):
    """Quita el H1 inicial (y las líneas en blanco que le siguen) si aparece al principio."""
    m = H1_RE.search(text)
    if m and m.start() < TITLE_WINDOW:
        return text[m.end():]
    return text


def extract_description(text):
    body = strip_first_h1(text).strip()

    lines = []
    for line in body.split("\n"):
        trimmed = line.strip()
        if _is_boundary(trimmed):
            break
        lines.append(trimmed)

    desc = " ".join(lines)
    if len(desc) > DESC_MAX_LEN:
        desc = desc[:DESC_MAX_LEN]
        # Cortar en un espacio, pero nunca antes del carácter 100
        i = desc.rfind(" ")
        if i > DESC_MIN_CUT:
            desc = desc[:i]
        desc += ELLIPSIS
    return desc


def strip_first_paragraph(text):
    """Elimina el primer párrafo (ya usado como descripción) del cuerpo."""
    lines = text.strip().split("\n")
    for i, line in enumerate(lines):
        if _is_boundary(line.strip()):
            return "\n".join(lines[i:])
    return ""


class ContentParser:
    def __init__(self):
        # extra = tablas, fenced code, attr_list...; toc = ids automáticos en encabezados.
        # El HTML en bruto del markdown pasa sin escapar (contenido del autor).
        self.md = markdown.Markdown(extensions=['extra', 'codehilite', 'toc'])

    def render(self, body, source=""):
        try:
            html_content = self.md.convert(body)
        except Exception as e:
            raise BuildError(f"converting markdown: {e}", stage="convert", source=source) from e
        finally:
            # Sin estado compartido entre posts (ids de encabezados, etc.)
            self.md.reset()
        return html_content

    def parse(self, raw_md, publish_date, slug):
        content = strip_first_paragraph(strip_first_h1(raw_md))

        return Post(
            slug=slug,
            title=extract_title(raw_md),
            description=extract_description(raw_md),
            publish_date=publish_date,
            body_html=self.render(content, source=slug),
        )
