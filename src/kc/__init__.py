"""Read out and search plain text files."""

from .config import ViewerConfig as ViewerConfig
from .errors import FileAccessError as FileAccessError
from .matcher import BOUNDARY_CHARS as BOUNDARY_CHARS
from .matcher import MatchRecord as MatchRecord
from .matcher import find_matches as find_matches
from .matcher import search_lines as search_lines
from .output import ViewerOutput as ViewerOutput
from .reader import Line as Line
from .reader import LineReader as LineReader
from .utils import fatal as fatal
from .viewer import DisplayMode as DisplayMode
from .viewer import view as view
