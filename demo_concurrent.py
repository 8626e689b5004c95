import asyncio
from sdk.pystore import ProductClient, ProductApiError

PRODUCT = {
    "id": "race-1",
    "name": "Limited Lamp",
    "description": "Only one should exist",
    "price": 49.0,
    "image": "lamp.png",
    "category": "home",
}


async def main():
    c = ProductClient(base_url="http://127.0.0.1:8085/api")

    try:
        c.delete_product(PRODUCT["id"])
    except ProductApiError:
        pass

    # The existence check and the write are separate store calls, so
    # concurrent creates for one id may both get through.
    print("\n⚡ Sending 5 concurrent creates for the same id...")
    results = await asyncio.gather(*[
        c.create_product_async(dict(PRODUCT, name=f"Limited Lamp #{i}")) for i in range(5)
    ])
    for i, r in enumerate(results):
        print(f"  request {i}: {r.status_code} {r.json() if r.content else ''}")

    created = sum(1 for r in results if r.status_code == 201)
    print(f"\n{created} of {len(results)} creates succeeded")
    print("📦 Stored product:", c.get_product(PRODUCT["id"]))


if __name__ == "__main__":
    asyncio.run(main())
