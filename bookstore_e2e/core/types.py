from typing import TypedDict


class Credentials(TypedDict):
    username: str
    password: str


class Book(TypedDict):
    isbn: str
    title: str
    author: str
    publish_date: str
    publisher: str
    pages: int
    description: str
    website: str
