# Strategy/Preference/Adjustable Parameters for building XLSX workbooks.

from ..spec import SpecContentPolicy, SpecXlsxEngineOptions

DEFAULT_XLSX_ENGINE_OPTIONS = SpecXlsxEngineOptions()
DEFAULT_CONTENT_POLICY = SpecContentPolicy()
