import sys
import argparse
import logging

from postpress.build import build_site
from postpress.config import DEFAULT_CONFIG_FILE, load_config
from postpress.errors import BuildError
from postpress.logger import logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Generador estático de blog a partir de posts Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos de uso:
  # Construir el sitio con la configuración por defecto (posts/ -> web/)
  python main.py

  # Directorios personalizados
  python main.py --posts drafts --output public
        """
    )

    parser.add_argument('--config', '-c', type=str, default=DEFAULT_CONFIG_FILE,
                        help='Fichero JSON de configuración (opcional)')
    parser.add_argument('--posts', '-p', type=str,
                        help='Directorio con los posts YYYY-MM-DD-*.md')
    parser.add_argument('--output', '-o', type=str,
                        help='Directorio de salida del sitio')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Logs de depuración')

    return parser.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        config = load_config(args.config)
        if args.posts:
            config['posts']['dir'] = args.posts
        if args.output:
            config['output']['dir'] = args.output

        posts = build_site(config)
    except BuildError as e:
        logger.error(f"❌ Build abortado: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Built {len(posts)} posts → {config['output']['dir']}/")
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
