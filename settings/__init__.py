from . import colors
from . import filesystem
from . import themes
