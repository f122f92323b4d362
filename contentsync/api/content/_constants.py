"""Constants for content classification (private)."""

MARKDOWN_EXTENSIONS = (
    ".md",
    ".mdx",
    ".mkd",
    ".mdwn",
    ".mdown",
    ".mdtxt",
    ".mdtext",
    ".markdown",
    ".text",
)

IMAGE_EXTENSIONS = (
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".svg",
    ".webp",
    ".heic",
    ".avif",
)

# Attachment folders note-taking vaults put embedded images in
IMAGE_DIRS = (
    "images",
    "Images",
)

EXTERNAL_LINK_PREFIX = "http"
