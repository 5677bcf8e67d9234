# Bundled banner files for ASCII Art Color
BANNER_FILES = {
    "standard": "standard.txt",
    "shadow": "shadow.txt",
    "thinkertoy": "thinkertoy.txt",
}
