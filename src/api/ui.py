"""浏览器界面（单页面）."""

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Document Translator</title>
<style>
  body { margin: 0; font-family: sans-serif; background: #111827; color: #e5e7eb; }
  header, footer { text-align: center; padding: 16px; color: #9ca3af; }
  main { display: grid; grid-template-columns: 1fr 1fr; gap: 24px; padding: 24px; }
  .panel { background: #1f2937; border-radius: 16px; padding: 24px; display: flex; flex-direction: column; gap: 16px; }
  .row { display: flex; gap: 8px; align-items: center; }
  select, textarea, button { font: inherit; }
  select, textarea { background: #111827; color: #e5e7eb; border: 1px solid #4b5563; border-radius: 6px; padding: 8px; }
  select { flex: 1; }
  textarea { height: 128px; resize: none; }
  textarea[readonly] { color: #9ca3af; }
  button { background: #4f46e5; color: white; border: 0; border-radius: 8px; padding: 10px 16px; cursor: pointer; }
  button:disabled { background: #4b5563; cursor: not-allowed; }
  #drop { border: 2px dashed #4b5563; border-radius: 8px; padding: 32px; text-align: center; cursor: pointer; min-height: 160px; }
  #drop.dragging { border-color: #6366f1; background: #312e81; }
  #output { flex: 1; display: flex; align-items: center; justify-content: center; text-align: center;
            background: #111827; border: 1px solid #374151; border-radius: 8px; min-height: 240px; }
  .error { color: #f87171; }
  .hidden { display: none; }
</style>
</head>
<body>
<header><h1>Document Translator</h1></header>
<main>
  <section class="panel">
    <div class="row">
      <select id="source" aria-label="Source language"></select>
      <button id="swap" aria-label="Swap languages">&#8646;</button>
      <select id="target" aria-label="Target language"></select>
    </div>
    <div id="drop" role="button" tabindex="0">
      <p id="drop-text">Drag &amp; drop a file here, or click to upload<br><small>PDF or Images (JPG, PNG, WEBP)</small></p>
      <input type="file" id="file" class="hidden" accept="application/pdf,image/jpeg,image/png,image/webp,image/gif">
    </div>
    <button id="clear" class="hidden">Clear File</button>
    <div>
      <div class="row">
        <strong style="flex:1">Knowledge Base</strong>
        <button id="kb-add">Add from file</button>
        <input type="file" id="kb-file" class="hidden"
               accept="application/pdf,image/jpeg,image/png,image/webp,image/gif,text/plain,.docx">
      </div>
      <div class="row" style="margin-top:8px"><select id="kb-select" aria-label="Select a knowledge base"></select></div>
      <textarea id="kb-content" style="width:100%;box-sizing:border-box;margin-top:8px" aria-label="Knowledge base content"></textarea>
    </div>
    <button id="translate" disabled>Translate Document</button>
  </section>
  <section class="panel">
    <h2>Translated Document</h2>
    <div id="output"><span id="placeholder">Your translated document will be available for download here.</span></div>
  </section>
</main>
<footer>For demonstration purposes only.</footer>
<script>
const API = "/api/v1/document-translator";
const TRANSLATION_TYPES = ["image/jpeg", "image/png", "image/webp", "image/gif", "application/pdf"];
const GLOSSARY_TYPES = TRANSLATION_TYPES.concat(["text/plain",
  "application/vnd.openxmlformats-officedocument.wordprocessingml.document"]);
const ui = { busy: false, hasFile: false, kbs: [], selectedKb: "default", result: null, error: null, loader: null };
const $ = (id) => document.getElementById(id);

function render() {
  const out = $("output");
  out.innerHTML = "";
  if (ui.loader) {
    out.textContent = ui.loader;
  } else if (ui.error) {
    out.innerHTML = '<div class="error"><p><b>Error</b></p><p></p></div>';
    out.querySelector("p:last-child").textContent = ui.error;
  } else if (ui.result) {
    const box = document.createElement("div");
    box.innerHTML = "<p><b>Translation Complete</b></p><p></p>";
    box.querySelector("p:last-child").textContent = ui.result;
    const btn = document.createElement("button");
    btn.textContent = "Download Document";
    btn.onclick = () => { window.location = API + "/download"; };
    box.appendChild(btn);
    out.appendChild(box);
  } else {
    out.textContent = "Your translated document will be available for download here.";
  }
  $("translate").disabled = ui.busy || !ui.hasFile;
  $("kb-add").disabled = ui.busy;
  $("kb-select").disabled = ui.busy;
  $("clear").classList.toggle("hidden", !ui.hasFile);
  const kb = ui.kbs.find((k) => k.id === ui.selectedKb);
  $("kb-content").value = kb ? kb.content : "";
  $("kb-content").readOnly = !kb || kb.read_only;
  $("kb-content").placeholder = kb && kb.read_only
    ? "This is the default, read-only knowledge base."
    : "Add or edit term definitions here. Example: - 'Term' should be translated as 'Translation'";
}

async function loadLanguages() {
  const data = await (await fetch(API + "/languages")).json();
  for (const id of ["source", "target"]) {
    $(id).innerHTML = "";
    for (const lang of data.languages) {
      $(id).add(new Option(lang.name, lang.code));
    }
  }
  $("source").value = data.selection.source;
  $("target").value = data.selection.target;
}

async function loadKnowledgeBases() {
  const data = await (await fetch(API + "/knowledge-bases")).json();
  ui.kbs = data.knowledge_bases;
  ui.selectedKb = data.selected_id;
  $("kb-select").innerHTML = "";
  for (const kb of ui.kbs) {
    $("kb-select").add(new Option(kb.name, kb.id));
  }
  $("kb-select").value = ui.selectedKb;
  render();
}

async function setLanguages() {
  await fetch(API + "/languages", { method: "PUT", headers: { "Content-Type": "application/json" },
    body: JSON.stringify({ source: $("source").value, target: $("target").value }) });
}

async function uploadInput(file) {
  if (!file) return;
  if (!TRANSLATION_TYPES.includes(file.type)) {
    alert("Unsupported file type. Please upload a PDF or an image file (JPEG, PNG, WEBP, GIF).");
    return;
  }
  const form = new FormData();
  form.append("file", file);
  const resp = await fetch(API + "/input", { method: "POST", body: form });
  const data = await resp.json();
  if (!resp.ok) { alert(data.detail); return; }
  ui.hasFile = true;
  ui.result = null;
  ui.error = null;
  $("drop-text").textContent = data.name;
  render();
}

async function generateKnowledgeBase(file) {
  if (!file) return;
  if (!GLOSSARY_TYPES.includes(file.type)) {
    alert("Unsupported file type for knowledge base generation. Please use PDF, DOCX, TXT or an image file.");
    return;
  }
  const form = new FormData();
  form.append("file", file);
  Object.assign(ui, { busy: true, error: null, result: null, loader: "Generating Knowledge Base..." });
  render();
  try {
    const resp = await fetch(API + "/knowledge-bases/generate", { method: "POST", body: form });
    const data = await resp.json();
    if (!resp.ok) { ui.error = data.detail || "Failed to generate knowledge base."; }
    await loadKnowledgeBases();
  } finally {
    Object.assign(ui, { busy: false, loader: null });
    render();
  }
}

async function translate() {
  Object.assign(ui, { busy: true, error: null, result: null, loader: "Translating..." });
  render();
  try {
    const resp = await fetch(API + "/translate", { method: "POST" });
    const reader = resp.body.getReader();
    const decoder = new TextDecoder();
    let buffer = "";
    for (;;) {
      const { value, done } = await reader.read();
      if (done) break;
      buffer += decoder.decode(value, { stream: true });
      let idx;
      while ((idx = buffer.indexOf("\\n\\n")) >= 0) {
        const line = buffer.slice(0, idx).replace(/^data: /, "");
        buffer = buffer.slice(idx + 2);
        const msg = JSON.parse(line);
        if (msg.type === "file") ui.result = msg.filename;
        if (msg.type === "error") ui.error = msg.message;
      }
    }
  } catch (err) {
    ui.error = err.message || "An unknown error occurred.";
  } finally {
    Object.assign(ui, { busy: false, loader: null });
    if (ui.error) ui.result = null;
    render();
  }
}

$("source").onchange = setLanguages;
$("target").onchange = setLanguages;
$("swap").onclick = async () => { await fetch(API + "/languages/swap", { method: "POST" }); await loadLanguages(); };
$("drop").onclick = () => $("file").click();
$("drop").onkeypress = (e) => { if (e.key === "Enter" || e.key === " ") $("file").click(); };
$("file").onchange = (e) => uploadInput(e.target.files[0]);
$("drop").ondragover = (e) => { e.preventDefault(); };
$("drop").ondragenter = (e) => { e.preventDefault(); $("drop").classList.add("dragging"); };
$("drop").ondragleave = (e) => { e.preventDefault(); $("drop").classList.remove("dragging"); };
$("drop").ondrop = (e) => {
  e.preventDefault();
  $("drop").classList.remove("dragging");
  uploadInput(e.dataTransfer.files[0]);
};
$("clear").onclick = async () => {
  await fetch(API + "/input", { method: "DELETE" });
  $("file").value = "";
  $("drop-text").textContent = "Drag & drop a file here, or click to upload";
  Object.assign(ui, { hasFile: false, result: null, error: null });
  render();
};
$("kb-add").onclick = () => $("kb-file").click();
$("kb-file").onchange = (e) => { generateKnowledgeBase(e.target.files[0]); e.target.value = ""; };
$("kb-select").onchange = async (e) => {
  await fetch(API + "/knowledge-bases/selected", { method: "PUT", headers: { "Content-Type": "application/json" },
    body: JSON.stringify({ id: e.target.value }) });
  await loadKnowledgeBases();
};
$("kb-content").oninput = async (e) => {
  const kb = ui.kbs.find((k) => k.id === ui.selectedKb);
  if (!kb || kb.read_only) return;
  kb.content = e.target.value;
  await fetch(API + "/knowledge-bases/" + encodeURIComponent(kb.id), { method: "PUT",
    headers: { "Content-Type": "application/json" }, body: JSON.stringify({ content: kb.content }) });
};
$("translate").onclick = translate;

loadLanguages();
loadKnowledgeBases();
</script>
</body>
</html>
"""
