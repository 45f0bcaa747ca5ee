from .logging import logger
from .tokenizer import plain_text_to_lemmas, is_only_letters, load_stop_words
from .wiki import read_records, wiki_xml_to_plain_text, strip_wiki_markup
