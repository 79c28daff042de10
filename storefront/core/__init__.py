"""Core domain: exceptions, promo codes, connected seller state and payload builders."""
