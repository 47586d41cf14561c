from customtkinter import *

from typing import Optional, Sequence

from gourmet.config.consts import GLOBAL_FONTS, DIALOG_SIZES


def Button(master, text, command, **kwargs):
  return CTkButton(master, text=text, command=command,  **kwargs)

def Label(master,  text,  **kwargs):
  return CTkLabel(master, text=text, **kwargs)


class Fonts:
  _fonts = {}

  @classmethod
  def load_fonts(cls, fonts:dict[str, dict]):
    for key, props in fonts.items():
      if key not in cls._fonts:
        cls._fonts[key] = CTkFont(**props)

  @classmethod
  def get(cls, key):
    if key not in cls._fonts:
      raise KeyError(f"La fuente con la clave '{key}' no ha sido registrada.")
    return cls._fonts[key]


class ModalDialog(CTkToplevel):
  """Ventana modal: bloquea hasta que se cierra y guarda el resultado."""

  def __init__(self, master, title, size='400x200'):
    super().__init__(master)
    self.title(title)
    self.geometry(size)
    self.transient(master)
    self.result = None
    self.protocol("WM_DELETE_WINDOW", self._close)

  def _finish(self, result):
    self.result = result
    self.destroy()

  def _close(self):
    self._finish(None)

  def show(self):
    # grab_set requiere que la ventana sea visible
    self.wait_visibility()
    self.grab_set()
    self.wait_window()
    return self.result


class MsgBox(ModalDialog):
   def __init__(self, master, title, msg):
    super().__init__(master, title, DIALOG_SIZES['msg'])

    self.label = Label(self, msg, wraplength=360, font=Fonts.get('label_normal'))
    self.label.pack(pady=20, padx=20)

    self.button = Button(self, 'OK', lambda: self._finish(True))
    self.button.pack(pady=10)


class TextBox(ModalDialog):
  """Muestra un bloque preformateado (listados y reportes) con fuente monoespaciada."""

  def __init__(self, master, title, content):
    super().__init__(master, title, DIALOG_SIZES['text'])

    box = CTkTextbox(self, font=Fonts.get('mono'), wrap='none')
    box.insert('0.0', content)
    box.configure(state='disabled')
    box.pack(fill='both', expand=True, padx=10, pady=10)

    Button(self, 'OK', lambda: self._finish(True)).pack(pady=10)


class ConfirmBox(ModalDialog):
  def __init__(self, master, msg, title='Confirmar'):
    super().__init__(master, title, DIALOG_SIZES['msg'])

    Label(self, msg, wraplength=360, font=Fonts.get('label_important')).pack(pady=20, padx=20)

    buttons = CTkFrame(self, fg_color='transparent')
    buttons.pack(pady=10)
    Button(buttons, 'Sí', lambda: self._finish(True), fg_color="#4CAF50", hover_color="#45A049").pack(side='left', padx=10)
    Button(buttons, 'No', lambda: self._finish(False), fg_color="#D32F2F", hover_color="#C62828").pack(side='left', padx=10)


class OptionBox(ModalDialog):
  """Un botón por opción; result es el índice elegido o None si se cierra la ventana."""

  def __init__(self, master, title, msg, options: Sequence[str]):
    super().__init__(master, title, DIALOG_SIZES['options'])

    Label(self, msg, font=Fonts.get('h2')).pack(pady=(20, 10), padx=20)
    for index, option in enumerate(options):
      Button(self, option, lambda i=index: self._finish(i), width=280, font=Fonts.get('btn_primary')).pack(pady=5, padx=20)


class DialogPrompter:
  """
  Implementación del Prompter con diálogos modales de customtkinter.
  La ventana raíz queda oculta; cada pregunta abre su propio diálogo.
  """

  def __init__(self, title: str):
    set_appearance_mode("dark")
    self.title = title
    self.root = CTk()
    self.root.title(title)
    self.root.withdraw()
    Fonts.load_fonts(GLOBAL_FONTS)

  def ask(self, message: str) -> Optional[str]:
    dialog = CTkInputDialog(text=message, title=self.title, font=Fonts.get('mono'))
    return dialog.get_input()

  def info(self, message: str) -> None:
    # Los textos de varias líneas (listados, reportes) van en la caja monoespaciada
    if message.count("\n") > 2:
      TextBox(self.root, self.title, message).show()
    else:
      MsgBox(self.root, self.title, message).show()

  def confirm(self, message: str) -> bool:
    return ConfirmBox(self.root, message).show() is True

  def choose(self, title: str, message: str, options: Sequence[str]) -> Optional[int]:
    return OptionBox(self.root, title, message, options).show()

  def close(self):
    self.root.destroy()
