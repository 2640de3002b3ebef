"""Breach detection using the HaveIBeenPwned Pwned Passwords API.

Uses the k-Anonymity model to check passwords without exposing them.
Only the first 5 characters of the SHA-1 hash are sent to the API; the
remaining 35 are matched locally against the suffixes it returns.
"""

import asyncio
import hashlib
import logging
from typing import Awaitable, Callable, Optional

import aiohttp

from core.config import (
    BREACH_CHECK_MIN_LENGTH,
    HASH_PREFIX_LENGTH,
    HIBP_ADD_PADDING,
    HIBP_API_URL,
    HIBP_USER_AGENT,
    REQUEST_TIMEOUT,
)
from core.errors import BreachServiceError, MalformedResponseError
from core.results import BreachResult, BreachStatus
from core.siem import log_siem_event


logger = logging.getLogger(__name__)

# Coroutine taking a hash prefix and returning the raw range response body
RangeFetcher = Callable[[str], Awaitable[str]]


def get_password_hash(password: str) -> tuple[str, str]:
    """Get SHA-1 hash of password split into prefix and suffix.

    Returns:
        Tuple of (prefix, suffix) where prefix is first 5 chars
        and suffix is remaining 35 chars (uppercase).
    """
    sha1_hash = hashlib.sha1(password.encode('utf-8')).hexdigest().upper()
    return sha1_hash[:HASH_PREFIX_LENGTH], sha1_hash[HASH_PREFIX_LENGTH:]


def find_suffix_count(body: str, suffix: str) -> Optional[int]:
    """Find the breach count for a hash suffix in a range response.

    Response format is "SUFFIX:COUNT" per line, CRLF or LF separated.

    Args:
        body: Raw response text
        suffix: 35-char uppercase hash suffix to look for

    Returns:
        Count for the matching line, or None if no line matches

    Raises:
        MalformedResponseError: If the matching line has a non-numeric or
            negative count
    """
    wanted = suffix.upper()
    for line in body.splitlines():
        if ':' not in line:
            continue
        hash_suffix, count = line.split(':', 1)
        if hash_suffix.strip().upper() != wanted:
            continue
        try:
            value = int(count.strip())
        except ValueError:
            raise MalformedResponseError("Range response has a non-numeric count") from None
        if value < 0:
            raise MalformedResponseError("Range response has a negative count")
        return value
    return None


async def fetch_range(
    prefix: str,
    api_url: str = HIBP_API_URL,
    timeout: float = REQUEST_TIMEOUT,
    user_agent: str = HIBP_USER_AGENT,
    add_padding: bool = HIBP_ADD_PADDING,
) -> str:
    """GET the range endpoint for a hash prefix.

    Raises:
        BreachServiceError: On any non-200 response
        aiohttp.ClientError / asyncio.TimeoutError: On transport failure
    """
    headers = {"User-Agent": user_agent}
    if add_padding:
        headers["Add-Padding"] = "true"

    async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout)) as session:
        async with session.get(f"{api_url}/range/{prefix}", headers=headers) as response:
            if response.status != 200:
                raise BreachServiceError(response.status)
            return await response.text()


class BreachChecker:
    """Checks passwords against the breach corpus with a range query.

    Holds configuration only; every check() is an independent
    request/response cycle, so one instance can serve concurrent checks.
    """

    def __init__(
        self,
        fetch: Optional[RangeFetcher] = None,
        min_length: int = BREACH_CHECK_MIN_LENGTH,
    ):
        """Initialize breach checker.

        Args:
            fetch: Range transport; defaults to fetch_range() over aiohttp
            min_length: Passwords shorter than this are not checked
        """
        self._fetch = fetch or fetch_range
        self.min_length = min_length

    async def check(self, password: str) -> BreachResult:
        """Look the password up in the breach corpus.

        Never raises for hashing, transport or parsing failures; those
        become BreachResult.error(). Task cancellation still propagates.
        """
        if not password or len(password) < self.min_length:
            return BreachResult.not_checked()

        try:
            prefix, suffix = get_password_hash(password)
            body = await self._fetch(prefix)
            count = find_suffix_count(body, suffix)
            # Padded responses carry decoy suffixes with a count of 0
            result = BreachResult.found(count) if count else BreachResult.not_found()
        except Exception as e:
            logger.warning("Breach check failed: %s", type(e).__name__)
            log_siem_event("breach_check", "ERROR", details={"error": type(e).__name__})
            return BreachResult.error()

        if result.status is BreachStatus.FOUND:
            log_siem_event("breach_check", "FOUND", details={"count": result.count})
        else:
            log_siem_event("breach_check", "NOT_FOUND")
        return result


async def check_password_breach(password: str, fetch: Optional[RangeFetcher] = None) -> BreachResult:
    """Check a password with a default-configured BreachChecker."""
    return await BreachChecker(fetch=fetch).check(password)


def format_breach_warning(breach_count: int) -> str:
    """Format a warning message based on breach count."""
    if breach_count == 0:
        return ""
    elif breach_count < 10:
        return f"This password appeared in {breach_count} data breach(es). Consider using a different password."
    elif breach_count < 100:
        return f"WARNING: This password was found {breach_count} times in data breaches!"
    elif breach_count < 1000:
        return f"DANGER: This password was exposed {breach_count} times in breaches. Do NOT use it!"
    else:
        return f"CRITICAL: This password was found {breach_count:,} times in breaches. It is extremely compromised!"


def describe_breach_result(result: BreachResult) -> str:
    """Human-readable message for any breach result."""
    if result.status is BreachStatus.CHECKING:
        return "Checking against HaveIBeenPwned database..."
    if result.status is BreachStatus.FOUND:
        return format_breach_warning(result.count)
    if result.status is BreachStatus.NOT_FOUND:
        return "No breaches found. This password has not been found in known data breaches."
    if result.status is BreachStatus.ERROR:
        return result.reason
    return ""


def check_and_warn(password: str, fetch: Optional[RangeFetcher] = None) -> tuple[bool, str]:
    """Check password and return safety status with message.

    Blocking wrapper for scripts; must not be called from a running loop.

    Returns:
        Tuple of (is_safe, message) where is_safe is False if breached.
    """
    result = asyncio.run(check_password_breach(password, fetch=fetch))

    if result.status is BreachStatus.NOT_CHECKED:
        return True, f"Password too short to check (minimum {BREACH_CHECK_MIN_LENGTH} characters)"

    if result.status is BreachStatus.ERROR:
        return True, f"{result.reason} (offline check only)"

    return not result.is_breached, describe_breach_result(result)


# CLI usage
if __name__ == "__main__":
    import getpass
    print("=== Password Breach Checker ===")
    print("Check if your password has been exposed in data breaches.")
    print("(Uses HaveIBeenPwned API with k-Anonymity - your password is never sent)\n")

    pwd = getpass.getpass("Enter password to check: ")
    if pwd:
        is_safe, message = check_and_warn(pwd)
        print(f"\nResult: {message}")
        if is_safe:
            print("Status: SAFE")
        else:
            print("Status: COMPROMISED - Choose a different password!")
