import queue
import customtkinter as ctk
from tkinter import ttk
from gui_utils import show_virtual_keyboard
from product_form import ProductForm

COLUMNS = ("ID", "Product", "Quantity")
COLUMN_WIDTHS = {"ID": 60, "Product": 240, "Quantity": 120}
POLL_MS = 100

def drain_updates(updates):
    """Empty the update queue and return the latest payload per kind ("all", "search", "error")."""
    latest = {}
    while True:
        try:
            kind, payload = updates.get_nowait()
        except queue.Empty:
            return latest
        latest[kind] = payload

class ProductWindow(ctk.CTk):
    def __init__(self, viewmodel):
        super().__init__()
        self.viewmodel = viewmodel
        self.form = ProductForm(viewmodel)
        self.title("MyProducts")
        self.geometry("640x720")
        self.all_products = []
        self.search_results = []
        self.updates = queue.Queue()
        self.build_ui()

        # Observers fire on the repository thread; hand off to the Tk loop
        self._on_all = lambda products: self.updates.put(("all", products))
        self._on_search = lambda products: self.updates.put(("search", products))
        self._on_error = lambda message: self.updates.put(("error", message))
        viewmodel.all_products.observe(self._on_all)
        viewmodel.search_results.observe(self._on_search)
        viewmodel.error_message.observe(self._on_error)
        self.protocol("WM_DELETE_WINDOW", self.on_close)
        self._poll_id = self.after(POLL_MS, self.poll_updates)

    def build_ui(self):
        self.name_var = ctk.StringVar()
        self.quantity_var = ctk.StringVar()

        ctk.CTkLabel(self, text="enter the product").pack(padx=10, pady=(10, 0))
        self.entry_name = ctk.CTkEntry(self, textvariable=self.name_var, font=("Arial", 20), width=320)
        self.entry_name.pack(padx=10, pady=(0, 10))

        ctk.CTkLabel(self, text="enter the quantity").pack(padx=10, pady=(10, 0))
        qty_frame = ctk.CTkFrame(self, fg_color="transparent")
        qty_frame.pack(padx=10, pady=(0, 10))
        self.entry_quantity = ctk.CTkEntry(qty_frame, textvariable=self.quantity_var, font=("Arial", 20), width=260)
        self.entry_quantity.pack(side="left")
        ctk.CTkButton(qty_frame, text="123", width=52,
                      command=lambda: show_virtual_keyboard(self.entry_quantity, "Quantity")).pack(side="left", padx=(8, 0))

        self.error_label = ctk.CTkLabel(self, text="", text_color="red")

        self.btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        self.btn_frame.pack(fill="x", padx=10, pady=10)
        for text, command in (("Add", self.on_add), ("Search", self.on_search),
                              ("Delete", self.on_delete), ("Clear", self.on_clear)):
            ctk.CTkButton(self.btn_frame, text=text, width=110, command=command).pack(side="left", expand=True, padx=5)

        list_frame = ctk.CTkFrame(self)
        list_frame.pack(fill="both", expand=True, padx=10, pady=10)
        style = ttk.Style()
        style.configure("Products.Treeview", font=("Arial", 14), rowheight=30)
        style.configure("Products.Treeview.Heading", font=("Arial", 14, "bold"))
        self.tree = ttk.Treeview(list_frame, columns=COLUMNS, show="headings", style="Products.Treeview")
        for col in COLUMNS:
            self.tree.heading(col, text=col)
            self.tree.column(col, width=COLUMN_WIDTHS[col])
        scrollbar = ttk.Scrollbar(list_frame, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        self.tree.pack(side="left", fill="both", expand=True)

    # ---------- form <-> widgets ----------
    def _read_fields(self):
        self.form.product_name = self.name_var.get()
        self.form.product_quantity = self.quantity_var.get()

    def _write_fields(self):
        self.name_var.set(self.form.product_name)
        self.quantity_var.set(self.form.product_quantity)
        self.show_error(self.form.error_message)
        self.refresh_list()

    def show_error(self, message):
        if message:
            self.error_label.configure(text=message)
            self.error_label.pack(padx=8, pady=8, before=self.btn_frame)
        else:
            self.error_label.configure(text="")
            self.error_label.pack_forget()

    def on_add(self):
        self._read_fields()
        self.form.add()
        self._write_fields()

    def on_search(self):
        self._read_fields()
        self.form.search()
        self._write_fields()

    def on_delete(self):
        self._read_fields()
        self.form.delete()
        self._write_fields()

    def on_clear(self):
        self.form.clear()
        self._write_fields()

    # ---------- list ----------
    def refresh_list(self):
        self.tree.delete(*self.tree.get_children())
        for p in self.form.visible_products(self.all_products, self.search_results):
            self.tree.insert("", "end", values=(p.id, p.name, p.quantity))

    def poll_updates(self):
        latest = drain_updates(self.updates)
        if "error" in latest:
            self.show_error(latest["error"])
        if "all" in latest:
            self.all_products = latest["all"]
        if "search" in latest:
            self.search_results = latest["search"]
        if "all" in latest or "search" in latest:
            self.refresh_list()
        self._poll_id = self.after(POLL_MS, self.poll_updates)

    def on_close(self):
        self.after_cancel(self._poll_id)
        self.viewmodel.all_products.remove_observer(self._on_all)
        self.viewmodel.search_results.remove_observer(self._on_search)
        self.viewmodel.error_message.remove_observer(self._on_error)
        self.destroy()
