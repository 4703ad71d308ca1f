import requests

from errors import ResponseBodyError, UnableToReachPage, UnsuccessfulRequest

# Wikipedia asks clients to identify themselves.
HEADERS = {"User-Agent": "wiki-table-dump/0.1 (contact@example.com)"}
REQUEST_TIMEOUT = 30
DEFAULT_ENCODING = "utf-8"


def fetch_page(url: str, timeout: float = REQUEST_TIMEOUT) -> str:
    """
    Downloads a page and returns its body as text.

    Raises:
        UnableToReachPage: The request could not be sent or timed out.
        UnsuccessfulRequest: The server answered with a non-2xx status.
        ResponseBodyError: The body could not be read or decoded.
    """
    try:
        response = requests.get(url, headers=HEADERS, stream=True, timeout=timeout)
    except requests.RequestException as exc:
        raise UnableToReachPage(f"Unable to reach page {url}: {exc}") from exc

    try:
        if not response.ok:
            raise UnsuccessfulRequest(
                f"Request did not respond with a 200 ({response.status_code} for {url})"
            )
        # requests assumes ISO-8859-1 for text/* without a charset.
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = DEFAULT_ENCODING
        try:
            return response.text
        except (requests.RequestException, UnicodeDecodeError, LookupError) as exc:
            raise ResponseBodyError(f"Failed to get body from response: {exc}") from exc
    finally:
        response.close()


if __name__ == "__main__":
    print("--- Testing page_downloader.py ---")

    test_url = "https://en.wikipedia.org/wiki/Member_states_of_the_United_Nations"
    print(f"\n[Test 1] Fetching {test_url}...")
    body = fetch_page(test_url)
    print(f"Received {len(body)} characters.")
    assert "wikitable" in body, "[Test 1] FAILED: No wikitable in page."
    print("[Test 1] Passed.")

    print("\n--- All tests complete. ---")
