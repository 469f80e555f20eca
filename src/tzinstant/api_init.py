"""Zone table bootstrap (import side-effect)."""
from .api import set_table
from .bootstrap import build_table

set_table(build_table())
