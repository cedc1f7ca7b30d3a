from .property_line import PropertyLine
from .settings import Settings, load_settings
