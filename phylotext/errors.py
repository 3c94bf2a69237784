class TreeRenderError(Exception):
    pass


class ConfigurationError(TreeRenderError):
    pass


class LayoutOverflowError(TreeRenderError):
    pass


class EmptyTreeError(TreeRenderError):
    pass


class DegenerateTreeError(TreeRenderError):
    pass


class NewickParseError(TreeRenderError):
    pass
