"""Query-style links used as hyperlink targets by a calling UI."""
from urllib.parse import quote_plus


def build_link(base_url: str, name: str, encode: bool = False) -> str:
    """
    Build "<base_url>?name=<name>".

    With encode=True the whole link is form-encoded (spaces become '+',
    reserved characters including '?' and '=' become %XX).
    """
    link = f"{base_url}?name={name}"
    if encode:
        return quote_plus(link, safe="")
    return link
