from .doc import Page
from .vector import SparseVector
from .tables import TermTables
from .request import PipelineRequest
from .response import TermDocumentMatrix, PipelineResponse
