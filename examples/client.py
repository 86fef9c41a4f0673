import asyncio
import logging

from wpapi import WP, UnsupportedMethodError, WPResponseError


def report(err: Exception | None, result: object) -> None:
    if err is not None:
        print(f"request failed: {err}")
    else:
        print(f"request succeeded: {result!r}")


async def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    wp = WP.from_env()

    categories = await wp.taxonomies().id("category").terms()
    print(categories)

    headers = await wp.posts().head()
    print(headers.get("x-wp-total"))

    try:
        await wp.users().me().get(report)
    except WPResponseError as e:
        print(f"not logged in ({e.status_code})")

    try:
        wp.taxonomies().post({"name": "nope"})
    except UnsupportedMethodError as e:
        print(e)


if __name__ == "__main__":
    asyncio.run(main())
