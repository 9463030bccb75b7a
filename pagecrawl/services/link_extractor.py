import re

# href value of an <a ...> tag, in matching double or single quotes. Attributes
# before href are skipped whole, quoted values included, so "href=" text inside
# another attribute's value is never taken for the real one.
ANCHOR_HREF_PATTERN = re.compile(
    r"""<a\b(?:[^>"']|"[^"]*"|'[^']*')*?(?<![\w-])href\s*=\s*(?:"([^"<>]*)"|'([^'<>]*)')""",
    re.IGNORECASE,
)


class LinkExtractor:
    def extract_links(self, html: str) -> list[str]:
        """Return the distinct href values of anchor tags in `html`.

        Duplicates are dropped case-insensitively, keeping the first spelling
        seen. Malformed markup simply yields fewer matches.
        """
        if not html:
            return []
        seen = set()
        links = []
        for match in ANCHOR_HREF_PATTERN.finditer(html):
            href = match.group(1) if match.group(1) is not None else match.group(2)
            if not href:
                continue
            key = href.casefold()
            if key in seen:
                continue
            seen.add(key)
            links.append(href)
        return links
