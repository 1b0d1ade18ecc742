"""Products, categories, items and orders, with a small demonstration command."""