"""Basic usage example: build a context and move it across formats."""

import httpx

from ctxmap import Context, ContextError, available_formats


def main() -> None:
    print(f"Available formats: {available_formats()}")

    ctx = Context.new()
    ctx.insert("request_id", "c0ffee")
    ctx.insert("user", {"id": 42, "roles": ["admin", "ops"]})
    ctx.extend({"retries": 2, "dry_run": False})

    print("\n=== JSON ===")
    print(ctx.to_json(pretty=True))

    print("\n=== TOML ===")
    print(ctx.to_toml())

    print("=== YAML ===")
    print(ctx.to_yaml())

    print("=== Headers ===")
    headers = ctx.to_headers(prefix="x-ctx-")
    for name, value in headers.items():
        print(f"{name}: {value}")

    # The receiving side rebuilds the string entries from the request
    request = httpx.Request("GET", "https://example.invalid/", headers=headers)
    received = Context.from_headers(request.headers, prefix="x-ctx-")
    print(f"\nReceived request_id: {received.get('request_id')}")

    print("\n=== Errors ===")
    try:
        Context.from_json("{ invalid: json }")
    except ContextError as exc:
        print(f"{type(exc).__name__} ({exc.kind}): {exc}")


if __name__ == "__main__":
    main()
