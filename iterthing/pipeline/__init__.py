from .lazy_chain import LazyChain, lazy
