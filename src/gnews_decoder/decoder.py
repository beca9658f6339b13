"""Google News URL decoding through the batchexecute RPC endpoint."""

import asyncio
import time
from pathlib import Path

import pandas as pd
import requests

from .client import create_session
from .config import BatchConfig, ClientConfig
from .exceptions import HttpError, InvalidParameterFormatError, InvalidUrlFormatError, RequestFailedError
from .identifier import extract_article_id
from .logger import get_logger
from .models import DecodeFailure, DecodeResult, DecodingParams, Diagnostic
from .params import fetch_decoding_params
from .parser import parse_response
from .payload import BATCH_EXECUTE_URL, build_headers, build_payload, build_request_body

logger = get_logger()


class GoogleNewsDecoder:
    """Decode Google News redirect URLs into publisher article URLs."""

    def __init__(self, config: ClientConfig | None = None, session: requests.Session | None = None):
        """
        Initialize the decoder.

        Args:
            config: Optional client configuration. Defaults to no proxy.
            session: Optional requests session. If None, one is created from config.
        """
        self.config = config or ClientConfig()
        self.session = session or create_session(self.config)

    def get_article_id(self, url: str) -> str | None:
        """
        Extract the article identifier from a Google News URL.

        Args:
            url: Google News article or RSS URL

        Returns:
            Article identifier, or None if the URL is not a Google News article URL
        """
        return extract_article_id(url)

    def get_decoding_params(self, article_id: str) -> DecodingParams | DecodeFailure:
        """
        Fetch the signing parameters for an article.

        Args:
            article_id: Identifier taken from the Google News URL

        Returns:
            DecodingParams on success, DecodeFailure otherwise
        """
        return fetch_decoding_params(self.session, article_id, self.config.timeout)

    def decode_url(self, params: DecodingParams) -> DecodeResult:
        """
        Send the signed batchexecute request and parse its response.

        Args:
            params: Signing parameters for one article

        Returns:
            DecodeResult with the publisher URL or the failure details
        """
        try:
            payload = build_payload(params)
        except InvalidParameterFormatError as e:
            return DecodeFailure.from_error(e)

        try:
            response = self.session.post(
                BATCH_EXECUTE_URL,
                data=build_request_body(payload),
                headers=build_headers(self.config.user_agent),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Batchexecute request failed", extra={"error": str(e)})
            return DecodeFailure.from_error(RequestFailedError(str(e)))

        if not response.ok:
            logger.warning("Batchexecute returned HTTP error", extra={"status_code": response.status_code})
            return DecodeFailure.from_error(
                HttpError(
                    f"HTTP code {response.status_code}",
                    diagnostic=Diagnostic(
                        http_status=response.status_code,
                        response_body=response.text,
                        request_payload=payload,
                    ),
                )
            )

        return parse_response(response.text)

    def _decode_once(self, url: str) -> DecodeResult:
        logger.info("Starting decode", extra={"url": url})

        article_id = self.get_article_id(url)
        if article_id is None:
            logger.warning("Invalid Google News URL", extra={"url": url})
            return DecodeFailure.from_error(InvalidUrlFormatError("Invalid Google News URL format"))
        logger.debug("Article identifier extracted", extra={"article_id": article_id})

        params = self.get_decoding_params(article_id)
        if isinstance(params, DecodeFailure):
            return params
        if not isinstance(params, DecodingParams):
            return DecodeFailure.from_error(InvalidParameterFormatError("Invalid parameters format"))

        result = self.decode_url(params)
        if result.ok:
            logger.info("Decode successful", extra={"url": url, "decoded_url": result.decoded_url})
        return result

    def decode(self, url: str, interval_ms: int = 0) -> DecodeResult:
        """
        Decode a Google News URL, blocking the calling thread.

        Args:
            url: Google News article or RSS URL
            interval_ms: Delay applied after a successful decode, in milliseconds

        Returns:
            DecodeSuccess or DecodeFailure
        """
        result = self._decode_once(url)
        if result.ok and interval_ms > 0:
            logger.debug("Applying post-decode delay", extra={"interval_ms": interval_ms})
            time.sleep(interval_ms / 1000)
        return result

    async def decode_async(self, url: str, interval_ms: int = 0) -> DecodeResult:
        """
        Decode a Google News URL without blocking the event loop.

        The network calls run on a worker thread; the post-success delay is an
        ``asyncio.sleep`` and is interrupted if the calling task is cancelled.

        Args:
            url: Google News article or RSS URL
            interval_ms: Delay applied after a successful decode, in milliseconds

        Returns:
            DecodeSuccess or DecodeFailure
        """
        result = await asyncio.to_thread(self._decode_once, url)
        if result.ok and interval_ms > 0:
            logger.debug("Applying post-decode delay", extra={"interval_ms": interval_ms})
            await asyncio.sleep(interval_ms / 1000)
        return result

    def process_csv(
        self, input_csv: str | Path, output_csv: str | Path, config: BatchConfig, interval_ms: int = 0
    ) -> None:
        """
        Decode every Google News URL in a CSV file, one at a time.

        Args:
            input_csv: Path to input CSV file
            output_csv: Path to output CSV file
            config: Configuration with column mappings
            interval_ms: Delay applied after each successful decode, in milliseconds
        """
        logger.info("Starting CSV processing", extra={"input": str(input_csv), "output": str(output_csv)})

        df = pd.read_csv(input_csv)
        logger.info("CSV loaded", extra={"rows": len(df), "columns": list(df.columns)})

        if config.id_column not in df.columns:
            raise ValueError(f"ID column '{config.id_column}' not found in CSV")

        missing_cols = [col for col in config.url_columns if col not in df.columns]
        if missing_cols:
            raise ValueError(f"URL columns not found in CSV: {missing_cols}")

        rows = []
        total_urls = len(df) * len(config.url_columns)
        processed = 0

        for _, row in df.iterrows():
            id_value = str(row[config.id_column])

            for url_col in config.url_columns:
                url = row[url_col]
                processed += 1

                logger.info(
                    "Processing URL",
                    extra={"progress": f"{processed}/{total_urls}", "id": id_value, "column": url_col},
                )

                if not isinstance(url, str) or not url.strip():
                    url = "" if pd.isna(url) else str(url)
                    result = DecodeFailure.from_error(InvalidUrlFormatError("Empty or invalid URL"))
                else:
                    url = url.strip()
                    result = self.decode(url, interval_ms=interval_ms)
                rows.append(_result_row(id_value, url, result))

        output_df = pd.DataFrame(
            rows, columns=["id", "url", "decoded_url", "status", "error_kind", "error_message"]
        )
        output_df.to_csv(output_csv, index=False)
        logger.info(
            "CSV processing complete",
            extra={
                "output": str(output_csv),
                "total": len(rows),
                "success": sum(1 for r in rows if r["status"] == "success"),
                "errors": sum(1 for r in rows if r["status"] == "error"),
            },
        )


def _result_row(id_value: str, url: str, result: DecodeResult) -> dict[str, str | None]:
    if result.ok:
        return {
            "id": id_value,
            "url": url,
            "decoded_url": result.decoded_url,
            "status": "success",
            "error_kind": None,
            "error_message": None,
        }
    return {
        "id": id_value,
        "url": url,
        "decoded_url": None,
        "status": "error",
        "error_kind": result.kind.value,
        "error_message": result.message,
    }
