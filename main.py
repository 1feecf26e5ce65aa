#!/usr/bin/env python3
"""
Book Normalizer - 책 필드 검증 및 URL 정리 CLI
URL 하나를 정리하거나, CSV/JSON 파일의 책 목록을 일괄 검증/정규화합니다.
"""

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Any

import pandas as pd

from models.book import BOOK_FIELDS, BookInput
from normalizer_logging import NormalizerLogger
from normalizers import CleanupError, CleanupOperation, ValidationErrorSet, cleanup, normalize_create

logger = NormalizerLogger("main")

# 입력 형식 오류 종료 코드
EXIT_INVALID_INPUT = 2


def _coerce(value: Any, cast: type) -> Any:
    """CSV 문자열을 숫자로 변환. 빈 값은 0, 변환 불가 값은 그대로 둬서 검증에서 보고"""
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not text:
        return cast(0)
    try:
        return cast(text)
    except ValueError:
        return value


def load_books(path: str | Path) -> list[dict[str, Any]]:
    """
    CSV 또는 JSON 파일에서 책 레코드 로드

    CSV는 모든 열을 문자열로 읽어 ISBN 앞자리 0/X가 보존되도록 한다.
    JSON은 객체 배열이어야 한다.
    """
    path = Path(path)
    if path.suffix.lower() == ".json":
        with open(path, encoding="utf-8") as f:
            records = json.load(f)
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise ValueError("JSON 입력은 객체 배열이어야 합니다")
        return records

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    records = df.to_dict(orient="records")
    for record in records:
        if "publication_year" in record:
            record["publication_year"] = _coerce(record["publication_year"], float)
        if "price" in record:
            record["price"] = _coerce(record["price"], float)
    return records


def normalize_books(records: list[dict[str, Any]]) -> list[tuple[BookInput, ValidationErrorSet]]:
    return [normalize_create(BookInput.from_dict(record)) for record in records]


def print_results(results: list[tuple[BookInput, ValidationErrorSet]]) -> None:
    """검증 결과 요약 출력"""
    invalid = [(i, errors) for i, (_, errors) in enumerate(results, 1) if errors]

    print(f"\n{'=' * 60}")
    print(f"검증 결과: {len(results)}건 중 {len(results) - len(invalid)}건 통과")
    print(f"{'=' * 60}")

    for row, errors in invalid:
        print(f"\n[{row}행]")
        for field, message in errors.fields.items():
            print(f"  {field}: {message}")

    print(f"\n{'-' * 60}")


def save_results(
    results: list[tuple[BookInput, ValidationErrorSet]],
    output: str,
    format: str = "csv",
) -> None:
    """결과를 파일로 저장 (정규화된 필드 + valid + errors)"""
    rows = []
    for book, errors in results:
        row = book.to_dict()
        row["valid"] = errors.ok
        row["errors"] = str(errors)
        rows.append(row)

    if format == "csv":
        df = pd.DataFrame(rows, columns=[*BOOK_FIELDS, "valid", "errors"])
        df.to_csv(output, index=False, encoding="utf-8-sig")
        print(f"\n결과가 {output}에 저장되었습니다.")

    elif format == "json":
        with open(output, "w", encoding="utf-8") as f:
            json.dump(rows, f, ensure_ascii=False, indent=2)
        print(f"\n결과가 {output}에 저장되었습니다.")


def run_url(args: argparse.Namespace) -> int:
    try:
        print(cleanup(args.url, args.operation))
    except CleanupError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    return 0


def run_books(args: argparse.Namespace) -> int:
    start = time.perf_counter()
    try:
        records = load_books(args.input)
    except (OSError, ValueError) as e:
        logger.error("load_failed", str(e), {"source": str(args.input)})
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    results = normalize_books(records)
    invalid = sum(1 for _, errors in results if errors)
    logger.batch_complete(
        str(args.input), len(results), invalid, (time.perf_counter() - start) * 1000
    )

    print_results(results)
    if args.output:
        save_results(results, args.output, args.format)

    return 1 if invalid else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="책 필드를 검증/정규화하고 URL을 정리합니다.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
  python main.py url "https://Example.com/Path/?a=1#top" --operation canonical
  python main.py url "https://example.com/Path/" -o all
  python main.py books books.csv --output normalized.csv
  python main.py books books.json --output normalized.json --format json
        """,
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="로깅 레벨 (기본: WARNING)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="로그 파일 경로 (JSON Lines 포맷)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    url_parser = subparsers.add_parser("url", help="URL 정리")
    url_parser.add_argument("url", type=str, help="정리할 URL")
    url_parser.add_argument(
        "--operation",
        "-o",
        type=str,
        default=CleanupOperation.CANONICAL.value,
        help="정리 방식: redirection | canonical | all (기본: canonical)",
    )
    url_parser.set_defaults(handler=run_url)

    books_parser = subparsers.add_parser("books", help="책 파일 일괄 검증/정규화")
    books_parser.add_argument("input", type=str, help="입력 파일 (.csv 또는 .json)")
    books_parser.add_argument(
        "--output", type=str, default=None, help="출력 파일 경로"
    )
    books_parser.add_argument(
        "--format",
        "-f",
        type=str,
        choices=["csv", "json"],
        default="csv",
        help="출력 형식 (기본: csv)",
    )
    books_parser.set_defaults(handler=run_books)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # 로깅 설정
    NormalizerLogger.configure(
        level=args.log_level,
        log_file=args.log_file,
        console=True,
    )

    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
