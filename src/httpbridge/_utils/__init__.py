from ._urls import check_url, extract_domain, is_valid_url

__all__ = ["check_url", "extract_domain", "is_valid_url"]
