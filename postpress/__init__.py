from postpress.build import build_site
from postpress.errors import BuildError
from postpress.models import Post, PostLink

__all__ = ['build_site', 'BuildError', 'Post', 'PostLink']
