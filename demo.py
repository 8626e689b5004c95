#!/usr/bin/env python
from sdk.pystore import ProductClient, ProductApiError


def main():
    c = ProductClient(base_url="http://127.0.0.1:8085/api")

    # -----------------------------
    # Create
    # -----------------------------
    print("Creating product p1...")
    print(c.create_product("p1", "Widget", "A widget", 9.99, "img.png", "tools"))

    # -----------------------------
    # Read
    # -----------------------------
    print("\nFetching p1...")
    print(c.get_product("p1"))
    print("\nListing products...")
    print(c.list_products())

    # -----------------------------
    # Partial update
    # -----------------------------
    print("\nRaising the price of p1...")
    print(c.update_product("p1", price=19.99))

    # -----------------------------
    # Rejected requests
    # -----------------------------
    print("\nCreating p1 again...")
    try:
        c.create_product("p1", "Widget", "A widget", 9.99, "img.png", "tools")
    except ProductApiError as e:
        print(e)

    print("\nCreating p2 with price 0...")
    try:
        c.create_product("p2", "Freebie", "Costs nothing", 0, "free.png", "tools")
    except ProductApiError as e:
        print(e)

    # -----------------------------
    # Delete
    # -----------------------------
    print("\nDeleting p1...")
    c.delete_product("p1")
    try:
        c.get_product("p1")
    except ProductApiError as e:
        print(e)


if __name__ == "__main__":
    main()
