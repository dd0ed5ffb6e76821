from site_tree.parser.html_parser import HtmlParser, Parser, attribute_values, iter_elements

__all__ = ["HtmlParser", "Parser", "attribute_values", "iter_elements"]
