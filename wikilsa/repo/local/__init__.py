from .storage import save_doc_freqs, load_doc_freqs
