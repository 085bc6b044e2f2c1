from models import Product
from validation import (
    ValidationError, validate_product_name, parse_quantity,
    MSG_NAME_EMPTY, MSG_NAME_SEARCH, MSG_NAME_DELETE,
)


class ProductForm:
    """
    State behind the product screen: the two text fields, whether the list
    shows search results, and the error line. Button handlers live here so
    the window only has to copy text in and out.
    """

    def __init__(self, viewmodel):
        self.viewmodel = viewmodel
        self.product_name = ""
        self.product_quantity = ""
        self.searching = False
        self.error_message = None

    def _reset_fields(self):
        self.product_name = ""
        self.product_quantity = ""

    def add(self):
        self.error_message = None
        try:
            name = validate_product_name(self.product_name, MSG_NAME_EMPTY)
            quantity = parse_quantity(self.product_quantity)
        except ValidationError as e:
            self.error_message = str(e)
            return False
        self.viewmodel.insert_product(Product(name, quantity))
        self.searching = False
        self._reset_fields()
        return True

    def search(self):
        self.error_message = None
        try:
            name = validate_product_name(self.product_name, MSG_NAME_SEARCH)
        except ValidationError as e:
            self.error_message = str(e)
            return False
        self.searching = True
        self.viewmodel.find_product(name)
        return True

    def delete(self):
        self.error_message = None
        try:
            name = validate_product_name(self.product_name, MSG_NAME_DELETE)
        except ValidationError as e:
            self.error_message = str(e)
            return False
        self.searching = False
        self.viewmodel.delete_product(name)
        self._reset_fields()
        return True

    def clear(self):
        self.error_message = None
        self.searching = False
        self._reset_fields()
        return True

    def visible_products(self, all_products, search_results):
        if self.searching:
            return list(search_results or [])
        return list(all_products or [])
