"""Wire encoders and decoders for histogram values."""
