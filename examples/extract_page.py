#!/usr/bin/env python3
"""Minimal example extracting listings from a snippet of a Wikivoyage page."""

from listings import extract_listings

PAGE = """
* {{see | name=[[Musée d'Orsay]] | lat=48.86 | long=2.3266
| price={{prix|16|€}} | content=Impressionist art in a former railway station.
}}
* {{eat | name=Bouillon Chartier | hours={{horaire|lu-di|11h30-24h}} }}
"""


def main():
    for listing in extract_listings(PAGE):
        print(listing.get_name(), listing.named_arguments())


if __name__ == "__main__":
    main()
