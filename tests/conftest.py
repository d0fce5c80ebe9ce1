import os
import tempfile

# ログファイルをユーザーのホームに書かないよう、import前に退避先を決める
os.environ.setdefault("SK_HOME_DIR", tempfile.mkdtemp(prefix="shimekiri-test-"))
