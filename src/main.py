import asyncio
import argparse
import json
import logging
from typing import Optional
from fastapi import FastAPI, Request
from naming.config import ResolverConfig
from naming.lookup import NameLookupHandler, NameLookupRequest, NameLookupResponse
from naming.resolver import DomainResolver
from dotenv import load_dotenv
from contextlib import asynccontextmanager

# Load environment variables
load_dotenv(override=True)

logger = logging.getLogger("naming")


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Conft domain resolver")
    parser.add_argument("chain_id", nargs="?", help="CAIP-2 chain id, e.g. eip155:1")
    parser.add_argument("domain", nargs="?", help="Domain to resolve, e.g. alice.conft")
    parser.add_argument(
        "--debug", action="store_true", default=False, help="Enable debug logging"
    )
    parser.add_argument(
        "--web", action="store_true", default=False, help="Run as web server"
    )
    parser.add_argument(
        "--port", type=int, default=8000, help="Port for web server mode"
    )
    return parser.parse_args()


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def initialize_lookup() -> NameLookupHandler:
    """Build the lookup handler from environment configuration"""
    return NameLookupHandler(DomainResolver(ResolverConfig.from_env()))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the lookup handler for the app's lifetime."""
    app.state.lookup = initialize_lookup()
    yield


app = FastAPI(lifespan=lifespan)


@app.post("/name-lookup", response_model=Optional[NameLookupResponse])
async def name_lookup(lookup_request: NameLookupRequest, request: Request):
    """Resolve a domain from a host lookup request; null when it does not resolve"""
    return await request.app.state.lookup.on_name_lookup(lookup_request)


@app.get("/resolve/{chain_id}/{domain}", response_model=Optional[NameLookupResponse])
async def resolve_domain(chain_id: str, domain: str, request: Request):
    return await request.app.state.lookup.on_name_lookup(
        NameLookupRequest(chain_id=chain_id, domain=domain)
    )


async def lookup_once(chain_id: str, domain: str) -> Optional[NameLookupResponse]:
    handler = initialize_lookup()
    return await handler.on_name_lookup(
        NameLookupRequest(chain_id=chain_id, domain=domain)
    )


def main() -> None:
    args = parse_args()
    configure_logging(args.debug)

    if args.web:
        import uvicorn

        uvicorn.run(app, host="0.0.0.0", port=args.port)
    elif args.chain_id and args.domain:
        response = asyncio.run(lookup_once(args.chain_id, args.domain))
        print(json.dumps(response.model_dump(by_alias=True) if response else None))
    else:
        logger.error("Pass a chain id and a domain, or --web to run the server")
        raise SystemExit(2)


if __name__ == "__main__":
    main()
