PRODUCT_NAME = "opmltree"
__version__ = "0.1.0"
