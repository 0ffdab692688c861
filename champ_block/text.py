NO_REASON = "No reason given"
EMPTY_BLOCKED_LIST = "No champions are currently blocked."
FETCH_FAILED = "Failed to load champion data. Please check the logs for details."
SEARCH_PLACEHOLDER = "Search and block a champion..."


def reason_text(reason: str) -> str:
    if isinstance(reason, str) and reason:
        return reason
    return NO_REASON


def no_results(query: str) -> str:
    return f'Found no results for "{query}"'
