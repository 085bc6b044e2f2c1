import customtkinter as ctk
from config import load_config
from db import init_db
from gui_products import ProductWindow
from gui_utils import show_popup_error
from viewmodel import ProductRepository, MainViewModel

def main():
    try:
        config = load_config()
    except Exception as e:
        raise SystemExit(f"Configuration error: {str(e)}")

    ctk.set_appearance_mode(config['APPEARANCE_MODE'])
    ctk.set_default_color_theme(config['COLOR_THEME'])

    try:
        init_db(config)
    except Exception as e:
        print(f"[main] Could not open the product store: {e}")
        show_popup_error(f"Could not open the product store: {e}")
        raise SystemExit(1)

    viewmodel = MainViewModel(ProductRepository(config))
    try:
        app = ProductWindow(viewmodel)
        app.mainloop()
    finally:
        viewmodel.close()

if __name__ == "__main__":
    main()
