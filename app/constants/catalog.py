# sentinel category option meaning "no filter"
ALL_CATEGORIES = "All"

PAGE_SIZE_OPTIONS = (5, 10, 15)
DEFAULT_PAGE_SIZE = 5

# title sort direction after each click on the header
SORT_TRANSITIONS = {
    None: "asc",
    "asc": "desc",
    "desc": "asc",
}

LOAD_ERROR_MESSAGE = "Failed to load books."
