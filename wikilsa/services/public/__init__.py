from .matrix import term_document_matrix
from .pipeline import parse_wikipedia, build_term_document_matrix, run_pipeline
