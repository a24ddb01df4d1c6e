from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from postpress.errors import BuildError
from postpress.logger import logger

PACKAGE_DIR = Path(__file__).parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
LOGO_PATH = PACKAGE_DIR / "static" / "logo.svg"
LOGO_NAME = "logo.svg"


def default_environment():
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
    )


def default_logo():
    try:
        return LOGO_PATH.read_bytes()
    except OSError as e:
        raise BuildError(f"reading logo: {e}", stage="config", source=str(LOGO_PATH)) from e


class SiteGenerator:
    def __init__(self, config, posts, env=None, logo=None):
        self.config = config
        self.posts = posts
        # Plantillas y logo se inyectan (o se cargan una sola vez aquí)
        self.env = env or default_environment()
        self.logo = default_logo() if logo is None else logo
        self.output_dir = Path(config['output']['dir'])
        self.written = []

    def generate(self):
        self._prepare_output()

        # 1. Copiar el logo
        self._write(LOGO_NAME, self.logo)

        # 2. Renderizar Indice
        self._render_index()

        # 3. Renderizar Posts Individuales
        self._render_posts()

        return self.written

    def _prepare_output(self):
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BuildError(f"creating output dir: {e}", stage="write", source=str(self.output_dir)) from e

    def _write(self, name, data):
        path = self.output_dir / name
        try:
            if isinstance(data, bytes):
                path.write_bytes(data)
            else:
                path.write_text(data, encoding="utf-8")
        except OSError as e:
            raise BuildError(f"writing file: {e}", stage="write", source=str(path)) from e
        self.written.append(path)
        return path

    def _render(self, template_name, source, **context):
        try:
            template = self.env.get_template(template_name)
            return template.render(config=self.config['blog'], **context)
        except TemplateError as e:
            raise BuildError(f"rendering {template_name}: {e}", stage="render", source=source) from e

    def _render_index(self):
        html = self._render('index.html', 'index', posts=self.posts)
        self._write('index.html', html)

    def _render_posts(self):
        for post in self.posts:
            html = self._render('post.html', post.slug, post=post, posts=self.posts)
            self._write(post.url, html)
            logger.debug(f"Renderizado {post.url}")
