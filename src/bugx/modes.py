from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Union
from .pipeline import Step, ScanList, SUBS, HOSTS, gau_file, gf_file, clean_file
from .steps.subenum import subfinder
from .steps.webprobe import httpx
from .steps.content import gau, gf
from .steps.scan import nuclei, dalfox

class Mode(IntEnum):
    EXIT = 0
    XSS = 1
    SQLI = 2
    LFI = 3
    SSRF = 4
    REDIRECT = 5
    SENSITIVE = 6
    CMS = 7
    RCE = 8
    RUN_ALL = 9

@dataclass(frozen=True)
class ModeSpec:
    mode: Mode
    tag: str          # gf pattern, staged-file suffix and results sub-directory
    label: str        # log prefix
    title: str        # banner text
    menu: str         # menu entry
    tags: str         # nuclei -tags
    no_list: str      # logged when no scan list could be chosen
    severity: Optional[str] = None

MODES: dict[Mode, ModeSpec] = {s.mode: s for s in (
    ModeSpec(Mode.XSS, "xss", "XSS", "XSS", "XSS", "xss",
             "Tidak ada daftar URL kandidat, hentikan mode XSS.", severity="medium,high,critical"),
    ModeSpec(Mode.SQLI, "sqli", "SQLi", "SQLi", "SQLi", "sqli",
             "Tidak ada URL kandidat, hentikan mode SQLi."),
    ModeSpec(Mode.LFI, "lfi", "LFI", "LFI/RFI", "LFI / RFI", "lfi",
             "Tidak ada URL kandidat LFI."),
    ModeSpec(Mode.SSRF, "ssrf", "SSRF", "SSRF", "SSRF", "ssrf",
             "Tidak ada URL kandidat SSRF."),
    ModeSpec(Mode.REDIRECT, "redirect", "REDIRECT", "OPEN REDIRECT", "Open Redirect", "redirect",
             "Tidak ada URL kandidat redirect."),
    ModeSpec(Mode.SENSITIVE, "sensitive", "SENSITIVE", "SENSITIVE/BACKUP", "Sensitive Files / Backup",
             "exposure,exposures,files,backup", "Tidak ada host list untuk scanning exposures."),
    ModeSpec(Mode.CMS, "cms", "CMS", "CMS/PANEL", "CMS / Panel",
             "wp,wordpress,drupal,joomla,cms,login,panel", "Tidak ada host list untuk scanning CMS."),
    ModeSpec(Mode.RCE, "rce", "RCE", "RCE/HIGH IMPACT", "RCE / High Impact",
             "rce,critical,takeover", "Tidak ada host list untuk scanning high-impact."),
)}

PARAM_MODES = (Mode.XSS, Mode.SQLI, Mode.LFI, Mode.SSRF, Mode.REDIRECT)

Chain = list[Union[Step, ScanList]]

def param_chain(spec: ModeSpec) -> Chain:
    """subfinder -> httpx -> gau -> gf -> httpx -> nuclei (+ dalfox for XSS).

    nuclei gets the gau harvest (or the host list), not the gf output, so
    coverage is not narrowed; clean_<tag>.txt is left for the operator.
    """
    tag = spec.tag
    chain: Chain = [
        subfinder(),
        httpx(SUBS, HOSTS),
        gau(tag),
        gf(tag),
        httpx(gf_file(tag), clean_file(tag), name=f"httpx (gf_{tag}->clean)"),
        ScanList((gau_file(tag), HOSTS), spec.no_list),
        nuclei(spec.tags, spec.severity),
    ]
    if spec.mode is Mode.XSS:
        chain.append(dalfox())
    return chain

def host_chain(spec: ModeSpec) -> Chain:
    """subfinder -> httpx -> nuclei over live hosts (or raw subdomains)."""
    cms = spec.mode is Mode.CMS
    return [
        subfinder(),
        httpx(SUBS, HOSTS, name="httpx (subs->hosts tech-detect)" if cms else None, tech_detect=cms),
        ScanList((HOSTS, SUBS), spec.no_list),
        nuclei(spec.tags, spec.severity),
    ]

def chain_for(spec: ModeSpec) -> Chain:
    return param_chain(spec) if spec.mode in PARAM_MODES else host_chain(spec)

def normalize_modes(values: Iterable[int]) -> list[int]:
    """Dedupe and sort into 1..8; a 9 anywhere means all of 1..8."""
    values = list(values)
    if Mode.RUN_ALL in values:
        return [int(m) for m in MODES]
    return sorted({int(v) for v in values if Mode.XSS <= v <= Mode.RCE})
