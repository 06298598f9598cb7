"""Text normalization: segmentation and tokenization."""
