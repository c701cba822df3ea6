"""
Feed Set-Cookie headers into a jar and show the Cookie header it produces.
"""

import logging

from crumbjar import CookieJar


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    jar = CookieJar()
    jar.diagnostics.subscribe(lambda event: print("event:", event.kind, event.name))

    jar.put(
        "http://example.com/",
        {
            "Set-Cookie": [
                "session=abc123; Path=/; Version=1",
                "prefs=dark; Path=/settings; Max-Age=3600",
                "tracker=1; Path=/; Expires=Wed, 09 Jun 2038 10:18:14 GMT",
            ]
        },
    )
    print(jar.get("http://example.com/settings/theme", {}))

    jar.put("http://example.com/", {"Set-Cookie": ["tracker=; Max-Age=0"]})
    for cookie in jar.get_cookies("example.com"):
        print(cookie)


if __name__ == "__main__":
    main()
