from .term_freqs import term_frequencies
from .doc_freqs import document_frequencies, document_frequency_counts
from .idf import inverse_document_frequencies
from .term_index import term_indices, invert_term_indices
from .vectors import assemble_vector, to_csr_matrix
