"""CLI script to run a retrieval strategy against a collection or the remote service."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .agent.graph import get_graph
from .remote.client import named_remote_retrieve
from .retrievers.factory import StrategyKind, is_local_strategy, make_retriever
from .vectorstore.client import get_weaviate_client
from .vectorstore.store import DocumentStore

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Retrieve documents with a configurable strategy"
    )
    parser.add_argument("query", type=str, help="Query text")
    parser.add_argument(
        "--strategy",
        type=str,
        default=StrategyKind.VECTOR_STORE.value,
        help=(
            "Local strategy (one of: "
            + ", ".join(kind.value for kind in StrategyKind)
            + ") or a remote retriever id (default: vector-store)"
        ),
    )
    parser.add_argument(
        "--collection",
        type=str,
        default="chunks_recursive_500_50",
        help="Weaviate collection for local strategies (default: chunks_recursive_500_50)",
    )
    parser.add_argument(
        "--answer",
        action="store_true",
        help="Answer the query from the retrieved documents instead of printing them",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run one retrieval and print the documents (or the answer) to stdout."""
    args = build_parser().parse_args(argv)

    load_dotenv()

    if args.answer:
        state = get_graph().invoke(
            {
                "query": args.query,
                "collection": args.collection,
                "retrieval_strategy": args.strategy,
                "messages": [],
                "documents": [],
            }
        )
        print(state["messages"][-1].content)
        return 0

    if is_local_strategy(args.strategy):
        client = get_weaviate_client()
        if client.get_collection_count(args.collection) == 0:
            logger.error(f"Collection '{args.collection}' not found or empty!")
            return 1
        store = DocumentStore.from_weaviate(client, args.collection)
        handle = make_retriever(args.strategy, store, query=args.query)
    else:
        handle = named_remote_retrieve(args.query, args.strategy)

    documents = handle.retrieve(args.query)
    logger.info(f"Retrieved {len(documents)} documents with {args.strategy}")

    json.dump([doc.to_dict() for doc in documents], sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
