from . import data
from . import parser
from .editor import DEFAULTS, GradlePropertiesEditor
from .properties_file import PropertiesFile
