from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from wordsuggest import Suggester
from frontend import add_suggester_args, build_suggester

app = Flask(__name__)
_suggester: Suggester | None = None
_vocab_size: int = 0


def attach(suggester: Suggester | None, vocab_size: int = 0) -> None:
    """Serve requests from ``suggester`` (already initialized)."""
    global _suggester, _vocab_size
    _suggester = suggester
    _vocab_size = int(vocab_size)


def _not_ready():
    return jsonify({"ok": False, "error": "suggester not initialized"}), 503


# ---------- API ----------
@app.get("/api/suggest")
async def api_suggest():
    if _suggester is None:
        return _not_ready()
    q = request.args.get("q", "", type=str)
    rows = await _suggester.suggest(q)
    return jsonify([r.to_dict() for r in rows])


@app.get("/api/predict")
async def api_predict():
    if _suggester is None:
        return _not_ready()
    context = request.args.get("context", "", type=str)
    rows = await _suggester.predict_next(context)
    return jsonify([r.to_dict() for r in rows])


@app.get("/health")
def health():
    if _suggester is None:
        return _not_ready()
    cfg = _suggester.config
    return jsonify({
        "ok": True,
        "engine": cfg.engine.value,
        "vocabulary": _vocab_size,
        "max_suggestions": cfg.max_suggestions,
        "min_score": cfg.min_score,
        "next_word_prediction": cfg.enable_next_word_prediction,
    })


# ---------- UI ----------
@app.get("/")
def home():
    # single page, no external JS/CSS
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Word suggestions</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.card{ max-width:640px; margin:32px auto; background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
input{ width:100%; box-sizing:border-box; padding:12px 14px; border-radius:12px; border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:16px; outline:none; }
input:focus{ border-color:var(--accent) }
.row{ display:grid; grid-template-columns:2rem 5rem 6rem 1fr; gap:10px; padding:8px 4px; border-top:1px solid var(--border); }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
.empty{ padding:18px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <form class="card" onsubmit="return false">
    <h1>Autocomplete</h1>
    <input id="q" type="text" placeholder="Type a word…" autocomplete="off" autofocus />
    <div id="out" class="empty">Start typing to see suggestions.</div>
  </form>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out");
let t;
async function run(){
  const text = q.value.trim();
  if(!text){ out.className = "empty"; out.textContent = "Start typing to see suggestions."; return; }
  const resp = await fetch(`/api/suggest?q=${encodeURIComponent(text)}`);
  const data = resp.ok ? await resp.json() : [];
  if(!data.length){ out.className = "empty"; out.textContent = "No suggestions."; return; }
  out.className = "";
  out.innerHTML = data.map((r,i)=>`<div class="row"><div class="small">${i+1}</div>`+
    `<div class="small">${r.score.toFixed(3)}</div><div class="small">${r.kind}</div><div>${r.word}</div></div>`).join("");
}
q.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(run, 120); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Suggester")
    add_suggester_args(ap)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    args = ap.parse_args(argv)

    suggester, n_words = build_suggester(ap, args)
    attach(suggester, vocab_size=n_words)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        attach(None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
