import argparse
import json
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor, as_completed

import requests
from tqdm import tqdm


PALETTE_KINDS = ["complementary", "analogous", "triadic", "monochromatic"]


def build_payload(request_num: int) -> tuple[str, str, dict | None]:
    """Pick (method, path, body) for the given request number"""
    hue = (request_num * 7) % 360
    kind = request_num % 6

    if kind == 0:
        return "POST", "/api/convert", {"type": "hex", "value": f"#{(request_num * 2654435761) % 0x1000000:06x}"}
    if kind == 1:
        return "POST", "/api/convert", {"type": "rgb", "value": {"r": request_num % 256, "g": (request_num * 3) % 256, "b": (request_num * 5) % 256}}
    if kind == 2:
        return "POST", "/api/convert", {"type": "hsl", "value": {"h": hue, "s": request_num % 101, "l": (request_num * 3) % 101}}
    if kind == 3:
        return "POST", "/api/convert", {"type": "hsv", "value": {"h": hue, "s": request_num % 101, "v": (request_num * 3) % 101}}
    if kind == 4:
        return "POST", "/api/palette", {
            "baseColor": {"hsv": {"h": hue, "s": 80, "v": 90}},
            "type": PALETTE_KINDS[(request_num // 6) % len(PALETTE_KINDS)],
            "count": 1 + request_num % 8,
        }
    return "GET", "/api/random", None


def send_request(base_url: str, request_num: int) -> int | str:
    """Function to send a single request, returns the status code or the error"""
    method, path, payload = build_payload(request_num)
    headers = {"Content-Type": "application/json"}

    try:
        if payload is None:
            response = requests.request(method, base_url + path, timeout=10)
        else:
            response = requests.request(method, base_url + path, data=json.dumps(payload), headers=headers, timeout=10)
        return response.status_code
    except requests.RequestException as e:
        return type(e).__name__


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--url", type=str, default="http://localhost:8080")
    parser.add_argument("--requests", type=int, default=10_000)
    parser.add_argument("--workers", type=int, default=100)
    args = parser.parse_args()

    start_time = time.time()
    results: Counter = Counter()

    with ThreadPoolExecutor(max_workers=args.workers) as executor:
        futures = [executor.submit(send_request, args.url.rstrip("/"), i) for i in range(args.requests)]

        for future in tqdm(as_completed(futures), total=len(futures)):
            results[future.result()] += 1

    end_time = time.time()
    for status, amount in sorted(results.items(), key=lambda kv: str(kv[0])):
        print(f"{status}: {amount}")
    print(f"Total time: {end_time - start_time:.2f} seconds")

if __name__ == "__main__":
    main()
