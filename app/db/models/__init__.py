# app/db/models/__init__.py
from .user import User
from .todo import Project, Task, Todo
