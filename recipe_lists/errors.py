"""Domain errors.

Every error carries a ``kind`` (a stable machine name), a human readable
``message`` and the HTTP ``status_code`` it maps to. Route handlers let
them propagate; the application turns them into ``{"error": message}``
responses.
"""


class RecipeListsError(Exception):
    kind = "error"
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(RecipeListsError):
    kind = "validation_error"
    status_code = 400


class ListAlreadyExists(RecipeListsError):
    kind = "list_already_exists"
    status_code = 400


class ListNotFound(RecipeListsError):
    kind = "list_not_found"
    status_code = 404


class RecipeNotFound(RecipeListsError):
    kind = "recipe_not_found"
    status_code = 404


class DuplicateRecipeName(RecipeListsError):
    kind = "duplicate_recipe_name"
    status_code = 400
