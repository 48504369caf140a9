# document_markers.py

TITLE_BEGIN = (
    "████████████████████████████████████████\n"
    "██████████████   TITLE   ███████████████\n"
    "████████████████████████████████████████"
)

CONTENT_BEGIN = (
    "████████████████████████████████████████\n"
    "██████████████  CONTENT  ███████████████\n"
    "████████████████████████████████████████"
)

DATE_BEGIN = (
    "████████████████████████████████████████\n"
    "██████████████   DATE    ███████████████\n"
    "████████████████████████████████████████"
)

# The date section runs to the end of the document.
END = "\n"

MARKER_NAMES = {
    TITLE_BEGIN: "TITLE",
    CONTENT_BEGIN: "CONTENT",
    DATE_BEGIN: "DATE",
}

BANNERS = (TITLE_BEGIN, CONTENT_BEGIN, DATE_BEGIN)
