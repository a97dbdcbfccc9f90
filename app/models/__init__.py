from app.models.book import Book

# add ALL models here
