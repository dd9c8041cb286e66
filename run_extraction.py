"""
Batch runner for the tweet entity extractor.

Reads:
  - a UTF-8 file with one tweet per line, or a JSON list of tweet strings

Produces:
  - a JSON list of {"text": ..., "entities": <extract() payload>, "ordered": [...]}

Usage:
  python run_extraction.py tweets.txt -o tweets_entities.json
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from twitter_text.config.constants import RULESET_VERSION
from twitter_text.config.settings import LOG_LEVEL, VALIDATE_OUTPUT
from twitter_text.extraction.extractor import extract
from twitter_text.extraction.pipeline import extract_entities_with_indices
from twitter_text.postprocessing.validation import validate_extraction_output

logger = logging.getLogger("run_extraction")


def load_tweets(path: Path) -> list:
    """A ``.json`` file must hold a list of strings; anything else is one tweet per line."""
    with open(path, encoding="utf-8") as f:
        if path.suffix == ".json":
            tweets = json.load(f)
            if not isinstance(tweets, list) or not all(isinstance(t, str) for t in tweets):
                raise ValueError(f"{path}: expected a JSON list of strings")
            return tweets
        return [line.rstrip("\n") for line in f if line.strip()]


def process_tweets(tweets: list, validate_output: bool = VALIDATE_OUTPUT) -> list:
    results = []
    invalid = 0

    for text in tweets:
        entities = extract(text)

        if validate_output:
            validation = validate_extraction_output(entities, text)
            if not validation.valid:
                invalid += 1
                logger.error("Invalid extraction for '%s': %s", text[:50], validation.errors)

        results.append({
            "text": text,
            "entities": entities,
            "ordered": [e.to_dict() | {"type": e.entity_type} for e in extract_entities_with_indices(text)],
        })

    if invalid:
        logger.warning("%d of %d tweets produced invalid payloads", invalid, len(tweets))

    return results


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Extract hashtags, cashtags, URLs and mentions from tweets.")
    parser.add_argument("input", type=Path, help="Tweets file (.txt, one per line, or .json list)")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output JSON file (default: stdout)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )

    logger.info("Rule set          : %s", RULESET_VERSION)
    logger.info("Loading tweets    : %s", args.input)
    tweets = load_tweets(args.input)
    logger.info("Tweets            : %d", len(tweets))

    results = process_tweets(tweets)

    payload = json.dumps(results, ensure_ascii=False, indent=2)
    if args.output is None:
        print(payload)
    else:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload)
        logger.info("Output saved to   : %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
