"""Go toolchain boundary."""

from toolchain.golist import (
    DEFAULT_GO_BINARY,
    GoListing,
    collect_listing,
    find_main_package,
    list_packages,
    prime_package_cache,
)

__all__ = [
    "DEFAULT_GO_BINARY",
    "GoListing",
    "collect_listing",
    "find_main_package",
    "list_packages",
    "prime_package_cache",
]
