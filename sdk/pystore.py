# sdk/pystore.py
import requests
import httpx
from typing import Any, Dict, List, Optional
from rich import print

PRODUCT_FIELDS = ("id", "name", "description", "price", "image", "category")


class ProductApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _check(r) -> None:
    """Raise ProductApiError with the server's message for any non-2xx response."""
    if r.status_code < 400:
        return
    try:
        body = r.json()
    except ValueError:
        body = None
    message = body.get("message", r.text) if isinstance(body, dict) else r.text
    raise ProductApiError(r.status_code, message)


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:8085/api", timeout: int = 10,
                 session=None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        # any requests-compatible session works (TestClient in tests)
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.transport = transport

    def create_product(self, id: str, name: str, description: str, price: float,
                       image: str, category: str) -> Dict[str, Any]:
        r = self.session.post(f"{self.base_url}/products", json={
            "id": id, "name": name, "description": description,
            "price": price, "image": image, "category": category,
        }, timeout=self.timeout)
        _check(r)
        return r.json()

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        _check(r)
        return r.json()

    def list_products(self) -> List[Dict[str, Any]]:
        r = self.session.get(f"{self.base_url}/products", timeout=self.timeout)
        _check(r)
        return r.json()

    def update_product(self, product_id: str, **fields) -> Dict[str, Any]:
        # only send what the caller set; omitted fields stay unchanged server-side
        payload = {k: v for k, v in fields.items() if v is not None}
        unknown = set(payload) - set(PRODUCT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown product fields: {', '.join(sorted(unknown))}")
        r = self.session.put(f"{self.base_url}/products/{product_id}", json=payload, timeout=self.timeout)
        _check(r)
        return r.json()

    def delete_product(self, product_id: str) -> None:
        r = self.session.delete(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        _check(r)

    # Async create (used by the concurrency demo)
    async def create_product_async(self, product: Dict[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            r = await client.post(f"{self.base_url}/products", json=product)
            # do not raise; callers compare status codes across concurrent requests
            return r


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Product service CLI")
    parser.add_argument("--base-url", default="http://127.0.0.1:8085/api")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True)

    cp = subparsers.add_parser("create-product", help="Create a product")
    cp.add_argument("--product-id", required=True)
    cp.add_argument("--name", required=True)
    cp.add_argument("--description", required=True)
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--image", required=True)
    cp.add_argument("--category", required=True)

    up = subparsers.add_parser("update-product", help="Update fields of a product")
    up.add_argument("--product-id", required=True)
    up.add_argument("--name")
    up.add_argument("--description")
    up.add_argument("--price", type=float)
    up.add_argument("--image")
    up.add_argument("--category")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    args = parser.parse_args()
    c = ProductClient(base_url=args.base_url)

    try:
        if args.command == "list-products":
            print(c.list_products())
        elif args.command == "get-product":
            print(c.get_product(args.product_id))
        elif args.command == "create-product":
            print(c.create_product(args.product_id, args.name, args.description,
                                   args.price, args.image, args.category))
        elif args.command == "update-product":
            print(c.update_product(args.product_id, name=args.name, description=args.description,
                                   price=args.price, image=args.image, category=args.category))
        elif args.command == "delete-product":
            c.delete_product(args.product_id)
            print(f"[green]Deleted {args.product_id}[/green]")
    except ProductApiError as e:
        print(f"[red]{e}[/red]")
        raise SystemExit(1)
