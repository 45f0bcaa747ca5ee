import argparse
import sys
from wikilsa import schemas
from wikilsa.core import config
from wikilsa.services.public import run_pipeline


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Build a TF-IDF term-document matrix from a Wikipedia XML dump."
    )
    p.add_argument("--dump", required=True, help="path to the XML dump")
    p.add_argument("--stop-words", default=config.STOP_WORDS_PATH)
    p.add_argument("--no-stop-words", action="store_true")
    p.add_argument("--num-terms", type=int, default=config.NUM_TERMS)
    p.add_argument("--doc-freqs", default=config.DOC_FREQS_PATH)
    p.add_argument(
        "--word-process-method",
        choices=["lemmatize", "stem"],
        default=config.WORD_PROCESS_METHOD,
    )
    p.add_argument("--scheduler", default=config.DASK_SCHEDULER)
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    request = schemas.PipelineRequest(
        dump_path=args.dump,
        stop_words_path=None if args.no_stop_words else args.stop_words,
        num_terms=args.num_terms,
        doc_freqs_path=args.doc_freqs,
        word_process_method=args.word_process_method,
        scheduler=args.scheduler,
    )
    response = run_pipeline(request)
    print(response.message)
    return 0 if response.status == "completed" else 1


if __name__ == "__main__":
    sys.exit(main())
