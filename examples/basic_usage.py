#!/usr/bin/env python3
"""
Basic usage examples for the graphql_fetch library.

This script demonstrates single and batched requests, middleware and
afterware, and file uploads against a public GraphQL endpoint.
"""

import asyncio
import sys
from pathlib import Path

from graphql_fetch import (
    GraphQLFetch,
    GraphQLRequest,
    HTTPError,
    LoggingConfig,
    LogLevel,
    UploadFile,
    create_graphql_fetch_upload,
    execute,
    setup_logging,
)

ENDPOINT = "https://countries.trevorblades.com/graphql"


async def example_single_request() -> None:
    """Example: Send one query with the convenience function."""
    print("=== Single Request ===\n")

    result = await execute(
        ENDPOINT,
        "query Country($code: ID!) { country(code: $code) { name capital } }",
        variables={"code": "NZ"},
    )
    print(f"Country: {result['data']['country']}\n")


async def example_middleware() -> None:
    """Example: Add headers before sending and inspect responses after."""
    print("=== Middleware and Afterware ===\n")

    def add_client_header(envelope, next):
        envelope.options.setdefault("headers", {})["X-Client"] = "graphql-fetch-example"
        next()

    async def log_status(envelope, next):
        print(f"Response status: {envelope.response.status}")
        next()

    async with GraphQLFetch(uri=ENDPOINT) as client:
        client.use(add_client_header).use_after(log_status)

        result = await client({"query": "{ continents { code name } }"})
        print(f"Continents: {len(result['data']['continents'])}\n")


async def example_batch() -> None:
    """Example: Send several operations in one request."""
    print("=== Batched Request ===\n")

    async with GraphQLFetch(uri=ENDPOINT) as client:
        try:
            results = await client(
                [
                    GraphQLRequest(query='{ country(code: "FR") { name } }'),
                    GraphQLRequest(query='{ country(code: "JP") { name } }'),
                ]
            )
        except HTTPError as e:
            # Not every server accepts batches
            print(f"Batch rejected: {e}\n")
            return

    for result in results:
        print(f"Result: {result}")
    print()


async def example_upload(path: Path) -> None:
    """Example: Send a file through the multipart upload option builder."""
    print("=== File Upload ===\n")

    async with create_graphql_fetch_upload(uri="https://api.example.com/graphql") as client:
        result = await client(
            {
                "query": "mutation Upload($file: Upload!) { upload(file: $file) { id } }",
                "variables": {"file": UploadFile(path=path)},
            }
        )
        print(f"Uploaded: {result}\n")


async def main() -> None:
    """Run all examples."""
    setup_logging(LoggingConfig(level=LogLevel.INFO))

    await example_single_request()
    await example_middleware()
    await example_batch()

    if len(sys.argv) > 1:
        await example_upload(Path(sys.argv[1]))


if __name__ == "__main__":
    asyncio.run(main())
