"""Self-contained browser page for Memo Desk.

HTML, CSS and JavaScript live in the ``INDEX_HTML`` constant so the page is
served as a single response with no static assets. Memo text is always
inserted through ``textContent``.
"""

INDEX_HTML = r"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Memo Management System</title>
<style>
:root {
  --bg: #f8fafc;
  --card: #ffffff;
  --fg: #1e293b;
  --muted: #64748b;
  --border: #e2e8f0;
  --accent: #3b82f6;
  --danger: #dc2626;
}
* { box-sizing: border-box; }
body { margin: 0; font-family: Arial, sans-serif; background: var(--bg); color: var(--fg); }
.container { max-width: 960px; margin: 0 auto; padding: 24px 16px; }
header { text-align: center; margin-bottom: 24px; }
header p { color: var(--muted); }
.tabs { display: grid; grid-template-columns: repeat(3, 1fr); gap: 4px; background: var(--border); padding: 4px; border-radius: 8px; }
.tabs button { border: 0; padding: 10px; border-radius: 6px; background: transparent; cursor: pointer; font-size: 14px; }
.tabs button.active { background: var(--card); font-weight: bold; }
.panel { display: none; margin-top: 24px; }
.panel.active { display: block; }
.card { background: var(--card); border: 1px solid var(--border); border-radius: 8px; padding: 20px; margin-bottom: 16px; }
.grid { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }
label { display: block; font-size: 14px; margin-bottom: 6px; }
input, select, textarea { width: 100%; padding: 8px; border: 1px solid var(--border); border-radius: 6px; font: inherit; }
.field { margin-bottom: 16px; }
.actions { display: flex; gap: 12px; }
.btn { background: var(--accent); color: white; border: 0; border-radius: 6px; padding: 10px 16px; cursor: pointer; font-size: 14px; }
.btn.outline { background: white; color: var(--fg); border: 1px solid var(--border); }
.memo-meta { color: var(--muted); font-size: 14px; margin-top: 6px; }
.memo-content { margin-top: 12px; padding: 12px; border-left: 4px solid var(--accent); background: var(--bg); white-space: pre-wrap; }
.badge { display: inline-block; padding: 2px 10px; border-radius: 999px; background: var(--border); font-size: 13px; }
.empty { text-align: center; color: var(--muted); padding: 48px 16px; }
#toasts { position: fixed; right: 16px; bottom: 16px; display: flex; flex-direction: column; gap: 8px; }
.toast { background: var(--card); border: 1px solid var(--border); border-radius: 8px; padding: 12px 16px; min-width: 260px; box-shadow: 0 4px 12px rgba(0,0,0,0.1); }
.toast.destructive { border-color: var(--danger); color: var(--danger); }
.toast strong { display: block; }
@media (max-width: 640px) { .grid { grid-template-columns: 1fr; } }
</style>
</head>
<body>
<div class="container">
  <header>
    <h1>Memo Management System</h1>
    <p>Create, manage, and generate reports for your organizational memos</p>
  </header>

  <nav class="tabs">
    <button data-tab="create" class="active">Create Memo</button>
    <button data-tab="list">View Memos</button>
    <button data-tab="reports">Reports</button>
  </nav>

  <section id="tab-create" class="panel active">
    <form id="memo-form" class="card" novalidate>
      <h2>Create New Memo</h2>
      <p class="memo-meta">Fill in the memo details below. All fields marked with * are required.</p>
      <div class="grid">
        <div class="field"><label for="subject">Subject *</label><input id="subject" name="subject" placeholder="Enter memo subject"></div>
        <div class="field"><label for="receivedDate">Received Date</label><input id="receivedDate" name="receivedDate" type="date"></div>
        <div class="field"><label for="from">From *</label><input id="from" name="from" placeholder="Sender name/department"></div>
        <div class="field"><label for="to">To *</label><input id="to" name="to" placeholder="Recipient name/department"></div>
      </div>
      <div class="field"><label for="dataDispatcher">Data Dispatcher</label><input id="dataDispatcher" name="dataDispatcher" placeholder="Data dispatcher name"></div>
      <div class="field"><label for="content">Content</label><textarea id="content" name="content" rows="4" placeholder="Memo content/description"></textarea></div>
      <div class="actions">
        <button type="submit" class="btn">Create Memo</button>
        <label class="btn outline" style="margin:0">Import CSV<input id="csv-file" type="file" accept=".csv" hidden></label>
      </div>
    </form>
  </section>

  <section id="tab-list" class="panel"><div id="memo-list"></div></section>

  <section id="tab-reports" class="panel">
    <div class="card">
      <h2>Generate Report</h2>
      <p class="memo-meta">Create and download reports in HTML or CSV format</p>
      <div class="grid">
        <div class="field"><label for="dateFrom">From Date</label><input id="dateFrom" type="date"></div>
        <div class="field"><label for="dateTo">To Date</label><input id="dateTo" type="date"></div>
        <div class="field"><label for="filterBy">Filter By</label>
          <select id="filterBy">
            <option value="all">All Memos</option>
            <option value="recent">Recent (Last 30 days)</option>
            <option value="urgent">Urgent Priority</option>
          </select></div>
        <div class="field"><label for="format">Report Format</label>
          <select id="format">
            <option value="html">HTML Report</option>
            <option value="csv">CSV Export</option>
          </select></div>
      </div>
      <button id="generate" class="btn">Generate &amp; Download Report</button>
    </div>
  </section>
</div>
<div id="toasts"></div>

<script>
const FORM_FIELDS = ["subject", "receivedDate", "from", "to", "dataDispatcher", "content"];

function toast(notification) {
  const el = document.createElement("div");
  el.className = "toast" + (notification.variant ? " " + notification.variant : "");
  const title = document.createElement("strong");
  title.textContent = notification.title;
  const body = document.createElement("span");
  body.textContent = notification.description;
  el.append(title, body);
  document.getElementById("toasts").appendChild(el);
  setTimeout(() => el.remove(), 5000);
}

function errorNotification(payload, fallback) {
  if (payload && payload.detail && typeof payload.detail === "object" && payload.detail.title) {
    return payload.detail;
  }
  return {title: "Error", description: fallback, variant: "destructive"};
}

function showTab(name) {
  document.querySelectorAll(".tabs button").forEach(b => b.classList.toggle("active", b.dataset.tab === name));
  document.querySelectorAll(".panel").forEach(p => p.classList.toggle("active", p.id === "tab-" + name));
  if (name === "list") loadMemos();
}

function el(tag, className, text) {
  const node = document.createElement(tag);
  if (className) node.className = className;
  if (text !== undefined) node.textContent = text;
  return node;
}

async function loadMemos() {
  const container = document.getElementById("memo-list");
  const response = await fetch("/memos");
  const view = await response.json();
  container.replaceChildren();

  if (view.emptyState) {
    const empty = el("div", "card empty");
    empty.append(el("h2", null, view.emptyState.title), el("p", null, view.emptyState.description));
    container.appendChild(empty);
    return;
  }

  const heading = el("h2", null, "Recent Memos ");
  heading.appendChild(el("span", "badge", view.label));
  container.appendChild(heading);

  for (const memo of view.memos) {
    const card = el("div", "card");
    card.appendChild(el("h3", null, memo.subject));
    let meta = "From: " + memo.from + "  →  To: " + memo.to;
    if (memo.displayDate) meta += "  |  " + memo.displayDate;
    card.appendChild(el("div", "memo-meta", meta));
    if (memo.content) card.appendChild(el("div", "memo-content", memo.content));
    if (memo.dataDispatcher) card.appendChild(el("span", "badge", "Dispatcher: " + memo.dataDispatcher));
    container.appendChild(card);
  }
}

async function submitMemo(event) {
  event.preventDefault();
  const form = event.target;
  const payload = {};
  FORM_FIELDS.forEach(name => { payload[name] = form.elements[name].value; });

  const response = await fetch("/memos", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify(payload),
  });
  const result = await response.json();
  if (!response.ok) {
    toast(errorNotification(result, "Could not create the memo."));
    return;
  }
  form.reset();
  toast(result.notification);
}

async function importCsv(event) {
  const file = event.target.files[0];
  if (!file) return;
  const body = new FormData();
  body.append("file", file);
  try {
    const response = await fetch("/memos/import", {method: "POST", body});
    const result = await response.json();
    toast(response.ok ? result.notification : errorNotification(result, "Error reading CSV file. Please check the format."));
  } finally {
    event.target.value = "";
  }
}

function filenameFrom(response, fallback) {
  const disposition = response.headers.get("Content-Disposition") || "";
  const match = disposition.match(/filename="([^"]+)"/);
  return match ? match[1] : fallback;
}

function saveBlob(blob, filename) {
  const url = URL.createObjectURL(blob);
  const link = document.createElement("a");
  try {
    link.href = url;
    link.download = filename;
    document.body.appendChild(link);
    link.click();
  } finally {
    link.remove();
    URL.revokeObjectURL(url);
  }
}

async function generateReport() {
  const config = {};
  ["dateFrom", "dateTo", "filterBy", "format"].forEach(id => { config[id] = document.getElementById(id).value; });

  const response = await fetch("/reports", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify(config),
  });
  if (!response.ok) {
    toast(errorNotification(await response.json(), "Could not generate the report."));
    return;
  }
  saveBlob(await response.blob(), filenameFrom(response, "memo-report." + config.format));
  const count = response.headers.get("X-Report-Memo-Count");
  toast({title: "Report Generated", description: "Successfully generated report with " + count + " memos."});
}

document.querySelectorAll(".tabs button").forEach(b => b.addEventListener("click", () => showTab(b.dataset.tab)));
document.getElementById("memo-form").addEventListener("submit", submitMemo);
document.getElementById("csv-file").addEventListener("change", importCsv);
document.getElementById("generate").addEventListener("click", generateReport);
</script>
</body>
</html>
"""
