import queue
import threading
from threading import Lock
from db import insert_product, get_all_products, find_products, delete_products


class LiveData:
    """
    Observable value. post_value() can be called from any thread; observers
    run on the calling thread, so UI observers must hand off to the Tk loop.
    """

    def __init__(self, value=None):
        self._value = value
        self._has_value = value is not None
        self._observers = []
        self._lock = Lock()

    @property
    def value(self):
        return self._value

    def observe(self, observer):
        with self._lock:
            self._observers.append(observer)
            has_value, value = self._has_value, self._value
        if has_value:
            observer(value)

    def remove_observer(self, observer):
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def post_value(self, value):
        with self._lock:
            self._value = value
            self._has_value = True
            observers = list(self._observers)
        for observer in observers:
            observer(value)


class ProductRepository:
    """
    Runs every store call on one background thread, in submission order,
    and publishes the results through LiveData.
    """

    def __init__(self, config):
        self.config = config
        self.all_products = LiveData()
        self.search_results = LiveData()
        self.error_message = LiveData()
        self._tasks = queue.Queue()
        self._worker = threading.Thread(target=self._run, name="product-repository", daemon=True)
        self._worker.start()
        self._submit(self._refresh_all)

    def _submit(self, func, *args):
        self._tasks.put((func, args))

    def _run(self):
        while True:
            task = self._tasks.get()
            try:
                if task is None:
                    return
                func, args = task
                try:
                    func(*args)
                except Exception as e:
                    print(f"[ProductRepository] Error in {func.__name__}: {e}")
                    self.error_message.post_value(str(e))
            finally:
                self._tasks.task_done()

    def _refresh_all(self):
        self.all_products.post_value(get_all_products(self.config))

    def _insert(self, product):
        insert_product(self.config, product)
        self._refresh_all()

    def _find(self, name):
        self.search_results.post_value(find_products(self.config, name))

    def _delete(self, name):
        delete_products(self.config, name)
        self._refresh_all()

    def insert_product(self, product):
        self._submit(self._insert, product)

    def find_product(self, name):
        self._submit(self._find, name)

    def delete_product(self, name):
        self._submit(self._delete, name)

    def join(self):
        self._tasks.join()

    def close(self):
        if self._worker.is_alive():
            self._tasks.put(None)
            self._worker.join()


class MainViewModel:
    def __init__(self, repository):
        self.repository = repository
        self.all_products = repository.all_products
        self.search_results = repository.search_results
        self.error_message = repository.error_message

    def insert_product(self, product):
        self.repository.insert_product(product)

    def find_product(self, name):
        self.repository.find_product(name)

    def delete_product(self, name):
        self.repository.delete_product(name)

    def wait_idle(self):
        self.repository.join()

    def close(self):
        self.repository.close()
