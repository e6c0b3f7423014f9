"""RocketShoes storefront cart core."""
