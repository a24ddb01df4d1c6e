from postpress.collection import load_posts
from postpress.generator import SiteGenerator
from postpress.logger import logger


def build_site(config, env=None, logo=None):
    """
    Build completo: leer posts -> ordenar/enlazar -> renderizar.
    Devuelve la lista ordenada de posts.
    """
    posts_dir = config['posts']['dir']
    logger.info(f"🏗️  Construyendo sitio desde {posts_dir}/ ...")

    # Se cargan todos los posts antes de tocar el directorio de salida
    posts = load_posts(posts_dir)

    SiteGenerator(config, posts, env=env, logo=logo).generate()
    logger.info(f"✅ {len(posts)} posts renderizados en {config['output']['dir']}/")
    return posts
