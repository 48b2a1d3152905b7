"""HTTP relay that embeds documents into a vector store and answers questions over them."""
